"""
Catalog Loading for GhostLens.

Turns raw catalog records (dicts, typically from JSON) into an immutable
Catalog. This is the only place catalog data is validated.

Design principles:
- Every record either becomes an Entity or an explicit Rejection
- The first record with a given id wins; later duplicates are rejected
- Rejections are logged and returned, never silently dropped

JSON document shape:

    {
        "evidence_kinds": ["EMF Level 5", ...],     (optional)
        "entities": [
            {"id": "spirit", "name": "Spirit",
             "evidence": ["EMF Level 5", "Spirit Box", "Ghost Writing"],
             "difficulty": "Beginner", ...}
        ]
    }

A bare list of entity records is accepted too.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from ..domain import (
    Catalog,
    CatalogError,
    CatalogRule,
    Entity,
    Rejection,
    make_entity,
)
from ..evidence import (
    ALL_EVIDENCE_KINDS,
    EvidenceKind,
    EvidenceStateError,
    parse_evidence_kind,
)
from .ghosts import GHOST_RECORDS

logger = logging.getLogger(__name__)


# Record keys that map onto optional Entity attributes
OPTIONAL_STRING_FIELDS = ("movement_speed", "activity_level", "description")


class CatalogParseError(Exception):
    """Raised when a catalog document cannot be read at all."""
    pass


# =============================================================================
# RECORD CONVERSION
# =============================================================================

def record_to_entity(record: Any) -> Entity:
    """
    Convert one raw record into an Entity.

    Raises:
        CatalogError: If the record is malformed (any CatalogRule)
    """
    if not isinstance(record, dict):
        raise CatalogError(
            CatalogRule.C7_MALFORMED_RECORD,
            f"record must be an object, got {type(record).__name__}",
        )

    entity_id = str(record.get("id") or "").strip()
    name = str(record.get("name") or "").strip()

    evidence = record.get("evidence", record.get("signature", []))
    if isinstance(evidence, str) or not isinstance(evidence, (list, tuple)):
        raise CatalogError(
            CatalogRule.C7_MALFORMED_RECORD,
            "evidence must be a list of evidence kinds",
            entity_id or None,
        )

    attributes: dict[str, Any] = {}

    threshold = record.get("hunt_sanity_threshold")
    if threshold is not None:
        if isinstance(threshold, bool) or not isinstance(threshold, int):
            raise CatalogError(
                CatalogRule.C7_MALFORMED_RECORD,
                f"hunt_sanity_threshold must be an integer, got {threshold!r}",
                entity_id or None,
            )
        attributes["hunt_sanity_threshold"] = threshold

    for key in OPTIONAL_STRING_FIELDS:
        value = record.get(key)
        if value is not None:
            attributes[key] = str(value)

    if record.get("difficulty") is not None:
        attributes["difficulty"] = record["difficulty"]

    return make_entity(entity_id, name, evidence, **attributes)


def parse_evidence_universe(values: Optional[Iterable[Any]]) -> tuple[EvidenceKind, ...]:
    """
    Parse the ordered evidence universe of a catalog document.

    Raises:
        CatalogParseError: If a kind is unknown or listed twice
    """
    if values is None:
        return ALL_EVIDENCE_KINDS

    universe: list[EvidenceKind] = []
    for value in values:
        try:
            kind = parse_evidence_kind(value)
        except EvidenceStateError as e:
            raise CatalogParseError(str(e))
        if kind in universe:
            raise CatalogParseError(f"evidence kind listed twice: {kind.value}")
        universe.append(kind)

    if not universe:
        raise CatalogParseError("evidence_kinds must not be empty")
    return tuple(universe)


# =============================================================================
# BATCH LOADING
# =============================================================================

@dataclass
class BatchLoadResult:
    """Result of loading a set of catalog records."""
    total_records: int
    catalog: Catalog
    rejected: list[Rejection]

    @property
    def acceptance_rate(self) -> float:
        if self.total_records == 0:
            return 0.0
        return len(self.catalog) / self.total_records


def load_catalog_records(
    records: Iterable[Any],
    evidence_kinds: Optional[Iterable[EvidenceKind]] = None,
) -> BatchLoadResult:
    """
    Load raw records into a Catalog.

    Args:
        records: Raw entity records, in catalog order
        evidence_kinds: Ordered evidence universe (all kinds if None)

    Returns:
        BatchLoadResult with the catalog and every rejection
    """
    universe = tuple(evidence_kinds) if evidence_kinds is not None else ALL_EVIDENCE_KINDS
    allowed = set(universe)

    accepted: list[Entity] = []
    rejected: list[Rejection] = []
    seen_ids: set[str] = set()
    total = 0

    for index, record in enumerate(records):
        total += 1
        try:
            entity = record_to_entity(record)

            if entity.id in seen_ids:
                raise CatalogError(
                    CatalogRule.C5_DUPLICATE_ID,
                    f"id '{entity.id}' appears more than once",
                    entity.id,
                )

            outside = [k for k in entity.signature if k not in allowed]
            if outside:
                raise CatalogError(
                    CatalogRule.C4_UNKNOWN_EVIDENCE,
                    f"{entity.name} uses evidence outside the catalog universe: "
                    f"{', '.join(k.value for k in outside)}",
                    entity.id,
                )

        except CatalogError as e:
            rejection = Rejection.from_error(e, index)
            logger.warning(
                "Rejected catalog record %d (%s): %s",
                index, rejection.entity_id, e,
            )
            rejected.append(rejection)
            continue

        seen_ids.add(entity.id)
        accepted.append(entity)

    logger.debug("Loaded %d of %d catalog records", len(accepted), total)

    return BatchLoadResult(
        total_records=total,
        catalog=Catalog(entities=tuple(accepted), evidence_kinds=universe),
        rejected=rejected,
    )


def load_catalog_document(document: Any) -> BatchLoadResult:
    """
    Load a parsed JSON document (object with "entities", or a bare list).

    Raises:
        CatalogParseError: If the document has the wrong shape
    """
    if isinstance(document, list):
        return load_catalog_records(document)

    if not isinstance(document, dict) or "entities" not in document:
        raise CatalogParseError(
            'catalog must be a list of records or an object with an "entities" list'
        )

    entities = document["entities"]
    if not isinstance(entities, list):
        raise CatalogParseError('"entities" must be a list')

    universe = parse_evidence_universe(document.get("evidence_kinds"))
    return load_catalog_records(entities, evidence_kinds=universe)


def load_catalog_file(path: Union[str, Path]) -> BatchLoadResult:
    """
    Load a catalog from a JSON file.

    Raises:
        CatalogParseError: If the file cannot be read or is not valid JSON
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogParseError(f"Cannot read catalog {path}: {e}")

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise CatalogParseError(f"Invalid JSON in {path}: {e}")

    return load_catalog_document(document)


def default_catalog() -> Catalog:
    """Build the bundled reference catalog of 24 ghosts."""
    result = load_catalog_records(GHOST_RECORDS)
    if result.rejected:
        # Bundled data is fixed; a rejection here is a packaging bug
        raise CatalogError(
            result.rejected[0].rule,
            f"bundled catalog is invalid: {result.rejected[0].reason}",
            result.rejected[0].entity_id,
        )
    return result.catalog

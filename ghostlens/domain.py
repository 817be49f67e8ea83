"""
Core Domain Objects for GhostLens.

Domain Objects:
    Entity      — A ghost type defined by its fixed evidence signature
    Catalog     — The immutable, ordered set of entities for a session
    Rejection   — An explicit discard of a malformed catalog record

Catalog invariants (enforced at construction):
    - Entity ids are unique
    - No signature is empty
    - Every signature kind belongs to the catalog's evidence universe

Signatures may overlap freely, including two entities with identical
signatures. Such ties are real and are surfaced by the engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Iterator, Optional, Union

from .evidence import (
    ALL_EVIDENCE_KINDS,
    EvidenceKind,
    EvidenceStateError,
    parse_evidence_kind,
)


# =============================================================================
# REJECTION SYSTEM
# =============================================================================

class CatalogRule(Enum):
    """
    Rules a catalog record can violate.

    C1: Missing or empty id
    C2: Missing or empty name
    C3: Empty evidence signature
    C4: Evidence kind not in the catalog universe
    C5: Duplicate id
    C6: Evidence kind repeated within one signature
    C7: Malformed record (wrong shape or attribute type)
    """
    C1_MISSING_ID = "missing_id"
    C2_MISSING_NAME = "missing_name"
    C3_EMPTY_SIGNATURE = "empty_signature"
    C4_UNKNOWN_EVIDENCE = "unknown_evidence"
    C5_DUPLICATE_ID = "duplicate_id"
    C6_REPEATED_EVIDENCE = "repeated_evidence"
    C7_MALFORMED_RECORD = "malformed_record"


class CatalogError(Exception):
    """Raised when catalog data violates an invariant."""

    def __init__(self, rule: CatalogRule, reason: str, entity_id: Optional[str] = None):
        self.rule = rule
        self.reason = reason
        self.entity_id = entity_id
        super().__init__(f"[{rule.value}] {reason}")


@dataclass(frozen=True)
class Rejection:
    """
    An explicit rejection of a catalog record with auditable reason.

    Rejected records never enter the catalog.
    """
    entity_id: str
    rule: CatalogRule
    reason: str
    index: int  # Position of the record in the source data

    @classmethod
    def from_error(cls, error: CatalogError, index: int) -> Rejection:
        return cls(
            entity_id=error.entity_id or "unknown",
            rule=error.rule,
            reason=error.reason,
            index=index,
        )


# =============================================================================
# ENTITY
# =============================================================================

class Difficulty(Enum):
    """How hard a ghost is to identify and survive."""
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


@dataclass(frozen=True)
class Entity:
    """
    A ghost type that the deduction engine can identify.

    Only id, name and signature take part in deduction. The descriptive
    attributes are carried through for display.
    """
    id: str
    name: str
    signature: tuple[EvidenceKind, ...]

    # Descriptive attributes, unused by the engine
    difficulty: Optional[Difficulty] = None
    hunt_sanity_threshold: Optional[int] = None
    movement_speed: Optional[str] = None
    activity_level: Optional[str] = None
    description: str = ""

    def __post_init__(self):
        """Validate entity requirements."""
        object.__setattr__(self, "signature", tuple(self.signature))

        if not self.id:
            raise CatalogError(CatalogRule.C1_MISSING_ID, "id is required")
        if not self.name:
            raise CatalogError(
                CatalogRule.C2_MISSING_NAME,
                "name is required",
                self.id,
            )
        if not self.signature:
            raise CatalogError(
                CatalogRule.C3_EMPTY_SIGNATURE,
                f"{self.name} has no evidence in its signature",
                self.id,
            )
        for kind in self.signature:
            if not isinstance(kind, EvidenceKind):
                raise CatalogError(
                    CatalogRule.C4_UNKNOWN_EVIDENCE,
                    f"signature entries must be EvidenceKind, got {type(kind).__name__}",
                    self.id,
                )
        if len(set(self.signature)) != len(self.signature):
            raise CatalogError(
                CatalogRule.C6_REPEATED_EVIDENCE,
                f"{self.name} lists the same evidence more than once",
                self.id,
            )

    @property
    def signature_set(self) -> frozenset[EvidenceKind]:
        return frozenset(self.signature)

    def has_evidence(self, kind: EvidenceKind) -> bool:
        return kind in self.signature


# =============================================================================
# CATALOG
# =============================================================================

@dataclass(frozen=True)
class Catalog:
    """
    The read-only entity catalog for a deduction session.

    Entity order is the catalog order, which is also the engine's final
    tie-break when two entities score the same.

    evidence_kinds is the ordered universe of observable kinds. Its size
    is the "total evidence kinds" used by confidence scoring.
    """
    entities: tuple[Entity, ...]
    evidence_kinds: tuple[EvidenceKind, ...] = ALL_EVIDENCE_KINDS
    _by_id: dict[str, Entity] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """Validate catalog invariants and build the id index."""
        object.__setattr__(self, "entities", tuple(self.entities))
        object.__setattr__(self, "evidence_kinds", tuple(self.evidence_kinds))

        universe = set(self.evidence_kinds)
        by_id: dict[str, Entity] = {}

        for entity in self.entities:
            if entity.id in by_id:
                raise CatalogError(
                    CatalogRule.C5_DUPLICATE_ID,
                    f"id '{entity.id}' appears more than once",
                    entity.id,
                )
            outside = [k for k in entity.signature if k not in universe]
            if outside:
                raise CatalogError(
                    CatalogRule.C4_UNKNOWN_EVIDENCE,
                    f"{entity.name} uses evidence outside the catalog universe: "
                    f"{', '.join(k.value for k in outside)}",
                    entity.id,
                )
            by_id[entity.id] = entity

        object.__setattr__(self, "_by_id", by_id)

    def __len__(self) -> int:
        return len(self.entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self.entities)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._by_id

    @property
    def total_evidence_kinds(self) -> int:
        return len(self.evidence_kinds)

    @property
    def max_signature_size(self) -> int:
        """Largest signature in the catalog (0 for an empty catalog)."""
        return max((len(e.signature) for e in self.entities), default=0)

    def get(self, entity_id: str) -> Optional[Entity]:
        return self._by_id.get(entity_id)

    def find_by_name(self, name: str) -> Optional[Entity]:
        """Case-insensitive lookup by display name or id."""
        wanted = name.strip().lower()
        for entity in self.entities:
            if entity.name.lower() == wanted or entity.id.lower() == wanted:
                return entity
        return None

    def entities_with(self, kind: EvidenceKind) -> list[Entity]:
        return [e for e in self.entities if e.has_evidence(kind)]

    def entities_matching(self, confirmed: Iterable[EvidenceKind]) -> list[Entity]:
        """Entities whose signature contains every given kind."""
        required = set(confirmed)
        return [e for e in self.entities if required <= e.signature_set]


def make_entity(
    entity_id: str,
    name: str,
    evidence: Iterable[Union[str, EvidenceKind]],
    **attributes: Any,
) -> Entity:
    """Factory for an Entity from loosely typed evidence names."""
    signature = []
    for item in evidence:
        try:
            signature.append(parse_evidence_kind(item))
        except EvidenceStateError as e:
            raise CatalogError(
                CatalogRule.C4_UNKNOWN_EVIDENCE,
                str(e),
                entity_id or None,
            )

    difficulty = attributes.pop("difficulty", None)
    if difficulty is not None and not isinstance(difficulty, Difficulty):
        try:
            difficulty = Difficulty(str(difficulty).capitalize())
        except ValueError:
            raise CatalogError(
                CatalogRule.C7_MALFORMED_RECORD,
                f"Invalid difficulty: {difficulty}",
                entity_id or None,
            )

    return Entity(
        id=entity_id,
        name=name,
        signature=tuple(signature),
        difficulty=difficulty,
        **attributes,
    )

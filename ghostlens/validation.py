"""
Evidence Validation for GhostLens.

Checks a whole evidence state against the catalog:

1. At least one entity's signature must contain every confirmed kind.
   If none does, the evidence is contradictory and the state is invalid.
2. Confirming more kinds than the largest signature in the catalog is
   a soft warning. It usually means a data-entry mistake, but does not
   by itself make the state invalid.

Findings are returned as data. Nothing here raises on a well-formed
catalog and state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .domain import Catalog
from .evidence import EvidenceState

logger = logging.getLogger(__name__)


# =============================================================================
# MESSAGES
# =============================================================================

NO_MATCH_MESSAGE = "No candidates match this evidence combination. Check your findings."


def too_much_evidence_message(max_signature_size: int) -> str:
    return (
        f"No candidate has more than {max_signature_size} evidence types. "
        f"Verify your evidence."
    )


# =============================================================================
# VALIDATION
# =============================================================================

@dataclass(frozen=True)
class ValidationResult:
    """Result of validating an evidence state."""
    valid: bool
    issues: tuple[str, ...] = field(default_factory=tuple)
    matching_ids: tuple[str, ...] = field(default_factory=tuple)


def validate_evidence(catalog: Catalog, evidence_state: EvidenceState) -> ValidationResult:
    """
    Validate confirmed evidence against the catalog.

    The state is valid when at least one entity is not eliminated.
    """
    confirmed = evidence_state.confirmed(catalog.evidence_kinds)
    matching = catalog.entities_matching(confirmed)

    issues: list[str] = []

    if not matching:
        issues.append(NO_MATCH_MESSAGE)

    max_size = catalog.max_signature_size
    if len(confirmed) > max_size:
        issues.append(too_much_evidence_message(max_size))

    if issues:
        logger.debug("Evidence validation issues: %s", issues)

    return ValidationResult(
        valid=bool(matching),
        issues=tuple(issues),
        matching_ids=tuple(e.id for e in matching),
    )

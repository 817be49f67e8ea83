"""
Hint Generator for GhostLens: which evidence to look for next.

For each evidence kind that is not yet confirmed:

    with_k          = catalog entities whose signature has k
    without_k       = catalog size - with_k
    max_elimination = max(with_k, without_k)
    distinguishing  = live candidates still missing k
    elimination     = round((max_elimination + distinguishing * 2) / 2)

Live candidates are all classification results that are not impossible.
Distinguishing power is weighted double because it measures the search
space that is actually left, not the whole catalog.

This is a greedy, single-step heuristic. It does not minimize expected
entropy or build an optimal decision tree; it only ranks the next
observation well enough to guide an investigator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from ..domain import Catalog
from ..evidence import EQUIPMENT_BY_EVIDENCE, EvidenceKind, EvidenceState
from .classifier import ClassificationResult
from .confidence import round_half_up

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

# Share of live candidates a hint must distinguish (strictly more than)
HIGH_PRIORITY_RATIO = 0.5
MEDIUM_PRIORITY_RATIO = 0.25

# How many top hints drive the equipment suggestion
EQUIPMENT_HINT_LIMIT = 3


class HintPriority(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


PRIORITY_RANK = {
    HintPriority.HIGH: 0,
    HintPriority.MEDIUM: 1,
    HintPriority.LOW: 2,
}


@dataclass(frozen=True)
class Hint:
    """A suggested next observation."""
    evidence: EvidenceKind
    reason: str
    elimination_power: int
    priority: HintPriority
    distinguishing_power: int
    max_elimination: int

    @property
    def equipment(self) -> str:
        return EQUIPMENT_BY_EVIDENCE[self.evidence]


def compute_priority(distinguishing_power: int, live_count: int) -> HintPriority:
    """Priority from strict thresholds on the live-candidate count."""
    if distinguishing_power > live_count * HIGH_PRIORITY_RATIO:
        return HintPriority.HIGH
    elif distinguishing_power > live_count * MEDIUM_PRIORITY_RATIO:
        return HintPriority.MEDIUM
    return HintPriority.LOW


def score_hint(
    kind: EvidenceKind,
    catalog: Catalog,
    classification: ClassificationResult,
) -> Hint:
    """Score one unconfirmed evidence kind."""
    remaining = classification.remaining

    with_kind = len(catalog.entities_with(kind))
    without_kind = len(catalog) - with_kind
    max_elimination = max(with_kind, without_kind)

    distinguishing = sum(1 for r in remaining if kind in r.missing)

    elimination_power = round_half_up((max_elimination + distinguishing * 2) / 2)

    if distinguishing > 0:
        reason = f"Distinguishes between {distinguishing} remaining possibilities"
    else:
        reason = f"Eliminates {max_elimination} candidates"

    return Hint(
        evidence=kind,
        reason=reason,
        elimination_power=elimination_power,
        priority=compute_priority(distinguishing, len(remaining)),
        distinguishing_power=distinguishing,
        max_elimination=max_elimination,
    )


def suggest_next(
    catalog: Catalog,
    evidence_state: EvidenceState,
    classification: ClassificationResult,
) -> list[Hint]:
    """
    Rank every unconfirmed evidence kind as the next thing to look for.

    Suspected kinds are still candidates; only CONFIRMED kinds are skipped.

    Returns:
        Hints sorted by priority (high first), then elimination power
        (highest first), then universe order
    """
    hints = [
        score_hint(kind, catalog, classification)
        for kind in catalog.evidence_kinds
        if not evidence_state.is_confirmed(kind)
    ]

    hints.sort(key=lambda h: (PRIORITY_RANK[h.priority], -h.elimination_power))

    logger.debug(
        "Generated %d hints over %d live candidates",
        len(hints),
        len(classification.remaining),
    )
    return hints


def required_equipment(hints: list[Hint], limit: int = EQUIPMENT_HINT_LIMIT) -> list[str]:
    """Equipment needed to check the top hints, in hint order."""
    return [hint.equipment for hint in hints[:limit]]

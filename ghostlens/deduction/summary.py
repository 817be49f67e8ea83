"""
Status Summaries for GhostLens.

Pure presentation over a ClassificationResult. These are VIEWS: they
never change a score, only describe one.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..domain import Catalog
from ..evidence import EvidenceState
from .classifier import ClassificationResult
from .confidence import round_half_up


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

# Below this many confirmed kinds, the first recommendation is to keep collecting
MIN_EVIDENCE_TO_NARROW = 2

MAX_RECOMMENDATIONS = 3


# =============================================================================
# STATUS LINE
# =============================================================================

def summarize(evidence_state: EvidenceState, classification: ClassificationResult) -> str:
    """
    One-line identification status.

    More than one definite match is a legitimate outcome when signatures
    overlap completely; it is reported as ambiguous rather than hidden.
    """
    if evidence_state.confirmed_count == 0:
        return "Start collecting evidence to identify the ghost"

    definite = classification.definite
    if len(definite) == 1:
        return f"CONFIRMED: {definite[0].entity_name}"

    if len(definite) > 1:
        names = ", ".join(r.entity_name for r in definite)
        return f"Multiple definite matches found ({names}). Need clarification."

    very_likely = classification.very_likely
    if very_likely:
        top = very_likely[0].entity_name
        if len(very_likely) == 1:
            return f"Very likely: {top}. Need 1 more evidence to confirm."
        return (
            f"{len(very_likely)} candidates are very likely, led by {top}. "
            f"Need 1 more evidence to confirm."
        )

    possible = classification.possible
    if possible:
        return f"{len(possible)} candidates match evidence. Continue collecting."

    if classification.total_eliminated == classification.total:
        return "No candidates match current evidence. Check your findings."

    return "Collecting evidence..."


# =============================================================================
# RECOMMENDATIONS
# =============================================================================

def next_step_recommendations(
    evidence_state: EvidenceState,
    classification: ClassificationResult,
) -> list[str]:
    """Up to three plain-English next steps."""
    confirmed_count = evidence_state.confirmed_count
    recommendations: list[str] = []

    if confirmed_count < MIN_EVIDENCE_TO_NARROW:
        recommendations.append(
            f"Collect at least {MIN_EVIDENCE_TO_NARROW} evidence types to narrow down"
        )

    if not classification.definite and confirmed_count >= MIN_EVIDENCE_TO_NARROW:
        recommendations.append("Collect 1 more evidence to get a definite match")

    if classification.very_likely:
        top = classification.very_likely[0]
        if top.missing:
            recommendations.append(
                f"Check for {top.missing[0].value} to confirm {top.entity_name}"
            )

    if classification.total_eliminated > 0:
        recommendations.append(
            f"Successfully eliminated {classification.total_eliminated} candidates"
        )

    return recommendations[:MAX_RECOMMENDATIONS]


# =============================================================================
# PROGRESS
# =============================================================================

@dataclass(frozen=True)
class Progress:
    """Investigation progress against the largest signature in the catalog."""
    percentage: int
    collected: int
    remaining: int


def calculate_progress(evidence_state: EvidenceState, catalog: Catalog) -> Progress:
    """
    Progress toward a full signature.

    The target is the catalog's largest signature size, so a catalog of
    three-evidence ghosts is complete at three confirmed kinds.
    """
    target = catalog.max_signature_size
    collected = evidence_state.confirmed_count

    if target == 0:
        return Progress(percentage=0, collected=collected, remaining=0)

    return Progress(
        percentage=min(100, round_half_up(collected / target * 100)),
        collected=collected,
        remaining=max(0, target - collected),
    )

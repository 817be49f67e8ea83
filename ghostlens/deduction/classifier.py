"""
Confidence Classifier for GhostLens.

Scores every catalog entity against the confirmed evidence and
partitions the results into five confidence bands.

Core principle:
    A contradiction always wins. An entity that lacks any confirmed
    evidence kind scores exactly 0, no matter how much else matches.

Ordering:
    Results are sorted by confidence, highest first. Equal confidences
    keep catalog order (stable sort). No other tie-break signal exists,
    so identical signatures stay tied and are reported side by side.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..domain import Catalog, Entity
from ..evidence import EvidenceKind, EvidenceState
from .confidence import (
    DEFAULT_CONFIG,
    MAX_CONFIDENCE,
    MIN_CONFIDENCE,
    ScoringConfig,
    compute_confidence,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIDENCE BANDS (Fixed Thresholds)
# =============================================================================

# Lower bounds of the two middle bands
VERY_LIKELY_MIN = 80
POSSIBLE_MIN = 20


class ConfidenceBand(Enum):
    """
    Confidence bands, strongest first.

    - DEFINITE:    100
    - VERY_LIKELY: 80-99
    - POSSIBLE:    20-79
    - UNLIKELY:    1-19
    - IMPOSSIBLE:  0
    """
    DEFINITE = "definite"
    VERY_LIKELY = "very_likely"
    POSSIBLE = "possible"
    UNLIKELY = "unlikely"
    IMPOSSIBLE = "impossible"


def compute_band(confidence: int) -> ConfidenceBand:
    """Assign a band from fixed confidence thresholds."""
    if confidence >= MAX_CONFIDENCE:
        return ConfidenceBand.DEFINITE
    elif confidence >= VERY_LIKELY_MIN:
        return ConfidenceBand.VERY_LIKELY
    elif confidence >= POSSIBLE_MIN:
        return ConfidenceBand.POSSIBLE
    elif confidence > MIN_CONFIDENCE:
        return ConfidenceBand.UNLIKELY
    else:
        return ConfidenceBand.IMPOSSIBLE


# =============================================================================
# MATCH RESULT
# =============================================================================

@dataclass(frozen=True)
class MatchResult:
    """
    How one entity fares against the current evidence.

    Exposes:
    - confidence (0-100) and its band
    - matched evidence (confirmed and in the signature)
    - missing evidence (in the signature, not yet confirmed)
    - extra evidence (confirmed but not in the signature)
    - one contradiction reason per extra kind
    - a human-readable reason
    """
    entity_id: str
    entity_name: str
    confidence: int
    matched: tuple[EvidenceKind, ...]
    missing: tuple[EvidenceKind, ...]
    extra: tuple[EvidenceKind, ...]
    contradictions: tuple[str, ...]
    reason: str

    @property
    def band(self) -> ConfidenceBand:
        return compute_band(self.confidence)

    @property
    def is_possible(self) -> bool:
        return self.confidence > MIN_CONFIDENCE

    @property
    def confirmation_message(self) -> Optional[str]:
        band = self.band
        if band == ConfidenceBand.DEFINITE:
            return f"{self.entity_name} CONFIRMED! All evidence matches."
        if band == ConfidenceBand.VERY_LIKELY:
            return f"{self.entity_name} is very likely. Collect more evidence to confirm."
        return None


def score_entity(
    entity: Entity,
    confirmed: tuple[EvidenceKind, ...],
    total_kinds: int,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> MatchResult:
    """
    Score a single entity against the confirmed evidence.

    Args:
        entity: Catalog entity
        confirmed: Confirmed evidence kinds, in universe order
        total_kinds: Size of the evidence universe
    """
    signature = entity.signature_set
    confirmed_set = set(confirmed)

    matched = tuple(k for k in confirmed if k in signature)
    extra = tuple(k for k in confirmed if k not in signature)
    missing = tuple(k for k in entity.signature if k not in confirmed_set)

    confidence = compute_confidence(
        matched_count=len(matched),
        signature_size=len(entity.signature),
        confirmed_count=len(confirmed),
        extra_count=len(extra),
        total_kinds=total_kinds,
        config=config,
    )

    if extra:
        contradictions = tuple(
            f'Has confirmed evidence "{kind.value}" which {entity.name} doesn\'t have'
            for kind in extra
        )
        reason = "IMPOSSIBLE - Contradictory evidence"
    else:
        contradictions = ()
        if len(matched) == len(entity.signature):
            reason = f"DEFINITE MATCH - All {len(matched)} evidence types confirmed"
        elif matched:
            reason = f"{len(matched)}/{len(entity.signature)} evidence match"
        else:
            reason = "Awaiting evidence collection"

    return MatchResult(
        entity_id=entity.id,
        entity_name=entity.name,
        confidence=confidence,
        matched=matched,
        missing=missing,
        extra=extra,
        contradictions=contradictions,
        reason=reason,
    )


# =============================================================================
# CLASSIFICATION RESULT
# =============================================================================

@dataclass(frozen=True)
class ClassificationResult:
    """
    Every catalog entity, scored and partitioned into bands.

    results holds all entities sorted by confidence. The band tuples
    partition results exactly: every entity appears in one band.
    """
    results: tuple[MatchResult, ...]
    confirmed: tuple[EvidenceKind, ...]

    @property
    def total(self) -> int:
        return len(self.results)

    def in_band(self, band: ConfidenceBand) -> tuple[MatchResult, ...]:
        return tuple(r for r in self.results if r.band == band)

    @property
    def definite(self) -> tuple[MatchResult, ...]:
        return self.in_band(ConfidenceBand.DEFINITE)

    @property
    def very_likely(self) -> tuple[MatchResult, ...]:
        return self.in_band(ConfidenceBand.VERY_LIKELY)

    @property
    def possible(self) -> tuple[MatchResult, ...]:
        return self.in_band(ConfidenceBand.POSSIBLE)

    @property
    def unlikely(self) -> tuple[MatchResult, ...]:
        return self.in_band(ConfidenceBand.UNLIKELY)

    @property
    def impossible(self) -> tuple[MatchResult, ...]:
        return self.in_band(ConfidenceBand.IMPOSSIBLE)

    @property
    def remaining(self) -> tuple[MatchResult, ...]:
        """Every result that is not impossible, in ranked order."""
        return tuple(r for r in self.results if r.is_possible)

    @property
    def total_eliminated(self) -> int:
        return len(self.impossible)

    def band_counts(self) -> dict[ConfidenceBand, int]:
        counts = {band: 0 for band in ConfidenceBand}
        for result in self.results:
            counts[result.band] += 1
        return counts

    def get(self, entity_id: str) -> Optional[MatchResult]:
        for result in self.results:
            if result.entity_id == entity_id:
                return result
        return None


# =============================================================================
# CLASSIFIER
# =============================================================================

def classify(
    catalog: Catalog,
    evidence_state: EvidenceState,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> ClassificationResult:
    """
    Score and rank every catalog entity against the evidence state.

    Only CONFIRMED evidence is used. SUSPECTED evidence has no effect.
    An empty catalog yields an empty classification.

    Returns:
        ClassificationResult sorted by confidence (highest first),
        ties in catalog order
    """
    confirmed = evidence_state.confirmed(catalog.evidence_kinds)

    results = [
        score_entity(entity, confirmed, catalog.total_evidence_kinds, config)
        for entity in catalog.entities
    ]

    # list.sort is stable: equal confidences keep catalog order
    results.sort(key=lambda r: r.confidence, reverse=True)

    classification = ClassificationResult(
        results=tuple(results),
        confirmed=confirmed,
    )

    logger.debug(
        "Classified %d entities with %d confirmed evidence: %s",
        classification.total,
        len(confirmed),
        {band.value: n for band, n in classification.band_counts().items()},
    )
    return classification

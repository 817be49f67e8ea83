"""
Confidence Scoring for GhostLens.

Every confidence value is an integer in [0, 100] computed from four
counts only: matched evidence, signature size, confirmed evidence and
the size of the evidence universe. Nothing else feeds the score.

Scoring rules, applied in order:
    1. Contradiction (confirmed evidence outside the signature) -> 0
    2. No confirmed evidence                                     -> 50
    3. Whole signature confirmed                                 -> 100
    4. Otherwise:
         base     = round(matched / signature_size * 100)
         adjusted = round((base + confirmed / total_kinds * 30) / 1.3)

Rule 4 rewards entities that match evidence found early while keeping
partial matches strictly below 100. The bonus weight (30) and divisor
(1.3) are tunable through ScoringConfig.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

# Baseline for every entity before any evidence is confirmed
NEUTRAL_CONFIDENCE = 50

# Progress bonus: weight of the investigation-progress term, and the
# divisor that keeps partial matches below a definite match
PROGRESS_BONUS_WEIGHT = 30.0
PROGRESS_BONUS_DIVISOR = 1.3

MIN_CONFIDENCE = 0
MAX_CONFIDENCE = 100


@dataclass(frozen=True)
class ScoringConfig:
    """
    Tunable scoring parameters.

    The defaults reproduce the reference behavior exactly.
    """
    neutral_confidence: int = NEUTRAL_CONFIDENCE
    progress_bonus_weight: float = PROGRESS_BONUS_WEIGHT
    progress_bonus_divisor: float = PROGRESS_BONUS_DIVISOR

    def __post_init__(self):
        if self.progress_bonus_divisor <= 0:
            raise ValueError(
                f"progress_bonus_divisor must be positive, got {self.progress_bonus_divisor}"
            )
        if not (MIN_CONFIDENCE < self.neutral_confidence < MAX_CONFIDENCE):
            raise ValueError(
                f"neutral_confidence must be in (0, 100), got {self.neutral_confidence}"
            )


DEFAULT_CONFIG = ScoringConfig()


# =============================================================================
# ARITHMETIC
# =============================================================================

def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from -inf (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def clamp_confidence(value: int) -> int:
    return max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, value))


# =============================================================================
# CONFIDENCE
# =============================================================================

def compute_partial_confidence(
    matched_count: int,
    signature_size: int,
    confirmed_count: int,
    total_kinds: int,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> int:
    """
    Confidence for a non-contradicted entity with part of its signature confirmed.

    Returns: integer in [0, 99] for any partial match
    """
    base = round_half_up(matched_count / signature_size * 100)

    progress = confirmed_count / total_kinds if total_kinds else 0.0
    adjusted = round_half_up(
        (base + progress * config.progress_bonus_weight) / config.progress_bonus_divisor
    )
    # Only a fully confirmed signature may reach 100
    return min(clamp_confidence(adjusted), MAX_CONFIDENCE - 1)


def compute_confidence(
    matched_count: int,
    signature_size: int,
    confirmed_count: int,
    extra_count: int,
    total_kinds: int,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> int:
    """
    Apply the full scoring rules to one entity.

    Args:
        matched_count: Confirmed kinds that are in the signature
        signature_size: Size of the entity's signature
        confirmed_count: All confirmed kinds
        extra_count: Confirmed kinds missing from the signature
        total_kinds: Size of the evidence universe
    """
    if extra_count > 0:
        return MIN_CONFIDENCE

    if confirmed_count == 0:
        return config.neutral_confidence

    if matched_count == signature_size:
        return MAX_CONFIDENCE

    return compute_partial_confidence(
        matched_count,
        signature_size,
        confirmed_count,
        total_kinds,
        config,
    )

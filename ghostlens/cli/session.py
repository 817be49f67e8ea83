"""
Deduction Session for GhostLens.

Ties the engine together into a single call:

    1. Classification (confidence bands)
    2. Hints (next evidence to collect)
    3. Validation (global contradictions)
    4. Status line, progress and recommendations

The session is read-only and deterministic. It keeps no state between
calls: the caller owns the evidence state and passes it in every time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..catalog.loader import default_catalog
from ..deduction.classifier import ClassificationResult, classify
from ..deduction.confidence import DEFAULT_CONFIG, ScoringConfig
from ..deduction.hints import Hint, required_equipment, suggest_next
from ..deduction.summary import (
    Progress,
    calculate_progress,
    next_step_recommendations,
    summarize,
)
from ..domain import Catalog
from ..evidence import EvidenceState, collected_equipment
from ..validation import ValidationResult, validate_evidence


# =============================================================================
# SESSION RESULT
# =============================================================================

@dataclass(frozen=True)
class SessionResult:
    """
    Everything the engine can say about one evidence state.
    """
    evidence_state: EvidenceState
    classification: ClassificationResult
    hints: tuple[Hint, ...]
    validation: ValidationResult
    status: str
    progress: Progress
    recommendations: tuple[str, ...]
    required_equipment: tuple[str, ...]
    collected_equipment: tuple[str, ...]


# =============================================================================
# SESSION EXECUTION
# =============================================================================

def run_session(
    evidence_state: EvidenceState,
    catalog: Optional[Catalog] = None,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> SessionResult:
    """
    Run every engine operation over one evidence state.

    Args:
        evidence_state: Current evidence board
        catalog: Entity catalog (bundled ghost catalog if None)
        config: Scoring parameters

    Returns:
        SessionResult with classification, hints and validation
    """
    if catalog is None:
        catalog = default_catalog()

    classification = classify(catalog, evidence_state, config)
    hints = suggest_next(catalog, evidence_state, classification)

    return SessionResult(
        evidence_state=evidence_state,
        classification=classification,
        hints=tuple(hints),
        validation=validate_evidence(catalog, evidence_state),
        status=summarize(evidence_state, classification),
        progress=calculate_progress(evidence_state, catalog),
        recommendations=tuple(next_step_recommendations(evidence_state, classification)),
        required_equipment=tuple(required_equipment(hints)),
        collected_equipment=tuple(collected_equipment(evidence_state)),
    )

"""
Tests for status summaries, recommendations, progress and sessions.

These tests verify:
1. The status line covers every identification outcome
2. Recommendations are capped and ordered
3. Progress is measured against the largest signature
4. A session runs every operation without keeping state
"""

import pytest

from ghostlens.catalog.loader import default_catalog
from ghostlens.cli.session import run_session
from ghostlens.deduction.classifier import classify
from ghostlens.deduction.summary import (
    calculate_progress,
    next_step_recommendations,
    summarize,
)
from ghostlens.domain import Catalog, Entity
from ghostlens.evidence import ALL_EVIDENCE_KINDS, EvidenceKind, EvidenceState


EMF = EvidenceKind.EMF_LEVEL_5
DOTS = EvidenceKind.DOTS_PROJECTOR
UV = EvidenceKind.ULTRAVIOLET
ORB = EvidenceKind.GHOST_ORB
WRITING = EvidenceKind.GHOST_WRITING
SPIRIT_BOX = EvidenceKind.SPIRIT_BOX
FREEZING = EvidenceKind.FREEZING_TEMPERATURES


def status_for(catalog, state):
    return summarize(state, classify(catalog, state))


def recommendations_for(catalog, state):
    return next_step_recommendations(state, classify(catalog, state))


def big_catalog():
    """One six-kind entity, so five confirmed kinds make it very likely."""
    return Catalog(entities=(
        Entity(id="big", name="Big", signature=ALL_EVIDENCE_KINDS[:6]),
        Entity(id="small", name="Small", signature=(EMF, FREEZING)),
    ))


# =============================================================================
# STATUS LINE TESTS
# =============================================================================

class TestSummarize:
    """Test the one-line status."""

    def setup_method(self):
        self.catalog = default_catalog()

    def test_no_evidence(self):
        assert status_for(self.catalog, EvidenceState()) == (
            "Start collecting evidence to identify the ghost"
        )

    def test_suspected_only_counts_as_no_evidence(self):
        state = EvidenceState.of(suspected=[EMF])
        assert status_for(self.catalog, state) == (
            "Start collecting evidence to identify the ghost"
        )

    def test_confirmed(self):
        state = EvidenceState.of(confirmed=[EMF, SPIRIT_BOX, WRITING])
        assert status_for(self.catalog, state) == "CONFIRMED: Spirit"

    def test_multiple_definite(self):
        catalog = Catalog(entities=(
            Entity(id="first", name="First", signature=(EMF, UV)),
            Entity(id="second", name="Second", signature=(EMF, UV)),
        ))
        state = EvidenceState.of(confirmed=[EMF, UV])

        assert status_for(catalog, state) == (
            "Multiple definite matches found (First, Second). Need clarification."
        )

    def test_very_likely(self):
        state = EvidenceState.of(confirmed=ALL_EVIDENCE_KINDS[:5])
        assert status_for(big_catalog(), state) == (
            "Very likely: Big. Need 1 more evidence to confirm."
        )

    def test_possible(self):
        state = EvidenceState.of(confirmed=[EMF, SPIRIT_BOX])
        assert status_for(self.catalog, state) == (
            "3 candidates match evidence. Continue collecting."
        )

    def test_everything_eliminated(self):
        state = EvidenceState.of(confirmed=[EMF, UV, ORB, DOTS])
        assert status_for(self.catalog, state) == (
            "No candidates match current evidence. Check your findings."
        )

    def test_only_unlikely_candidates(self):
        """A single seven-kind entity with one kind confirmed scores 14."""
        catalog = Catalog(entities=(
            Entity(id="huge", name="Huge", signature=ALL_EVIDENCE_KINDS),
        ))
        assert status_for(catalog, EvidenceState.of(confirmed=[EMF])) == "Collecting evidence..."


# =============================================================================
# RECOMMENDATION TESTS
# =============================================================================

class TestRecommendations:
    """Test plain-English next steps."""

    def setup_method(self):
        self.catalog = default_catalog()

    def test_no_evidence(self):
        assert recommendations_for(self.catalog, EvidenceState()) == [
            "Collect at least 2 evidence types to narrow down",
        ]

    def test_one_kind(self):
        assert recommendations_for(self.catalog, EvidenceState.of(confirmed=[EMF])) == [
            "Collect at least 2 evidence types to narrow down",
            "Successfully eliminated 14 candidates",
        ]

    def test_two_kinds(self):
        state = EvidenceState.of(confirmed=[EMF, SPIRIT_BOX])
        assert recommendations_for(self.catalog, state) == [
            "Collect 1 more evidence to get a definite match",
            "Successfully eliminated 21 candidates",
        ]

    def test_definite_match(self):
        state = EvidenceState.of(confirmed=[EMF, SPIRIT_BOX, WRITING])
        assert recommendations_for(self.catalog, state) == [
            "Successfully eliminated 23 candidates",
        ]

    def test_very_likely_names_missing_kind(self):
        state = EvidenceState.of(confirmed=ALL_EVIDENCE_KINDS[:5])
        assert recommendations_for(big_catalog(), state) == [
            "Collect 1 more evidence to get a definite match",
            "Check for Spirit Box to confirm Big",
            "Successfully eliminated 1 candidates",
        ]


# =============================================================================
# PROGRESS TESTS
# =============================================================================

class TestProgress:
    """Test progress against the largest signature."""

    def test_two_of_three(self):
        progress = calculate_progress(
            EvidenceState.of(confirmed=[EMF, SPIRIT_BOX]),
            default_catalog(),
        )
        assert progress.percentage == 67
        assert progress.collected == 2
        assert progress.remaining == 1

    def test_capped_at_100(self):
        progress = calculate_progress(
            EvidenceState.of(confirmed=[EMF, UV, ORB, DOTS]),
            default_catalog(),
        )
        assert progress.percentage == 100
        assert progress.remaining == 0

    def test_empty_catalog(self):
        progress = calculate_progress(EvidenceState.of(confirmed=[EMF]), Catalog(entities=()))
        assert progress.percentage == 0
        assert progress.collected == 1


# =============================================================================
# SESSION TESTS
# =============================================================================

class TestSession:
    """Test a full engine pass over one evidence state."""

    def test_session_defaults_to_bundled_catalog(self):
        session = run_session(EvidenceState.of(confirmed=[EMF, SPIRIT_BOX]))

        assert session.classification.total == 24
        assert session.status == "3 candidates match evidence. Continue collecting."
        assert session.validation.valid
        assert session.required_equipment == (
            "D.O.T.S. Projector", "Ghost Writing Book", "Thermometer",
        )
        assert session.collected_equipment == ("EMF Reader", "Spirit Box")
        assert session.progress.percentage == 67

    def test_session_keeps_no_state(self):
        first = run_session(EvidenceState.of(confirmed=[EMF]))
        run_session(EvidenceState.of(confirmed=[ORB, UV]))
        again = run_session(EvidenceState.of(confirmed=[EMF]))

        assert first == again

    def test_session_with_custom_catalog(self):
        catalog = Catalog(entities=(
            Entity(id="only", name="Only", signature=(EMF,)),
        ))
        session = run_session(EvidenceState.of(confirmed=[EMF]), catalog)

        assert session.status == "CONFIRMED: Only"
        assert session.hints[0].reason == "Eliminates 1 candidates"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

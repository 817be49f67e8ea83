"""
Tests for next-evidence hints.

These tests verify:
1. Confirmed kinds are never suggested
2. Elimination power and priority follow the live candidates
3. Ordering: priority first, then power, then universe order
4. Equipment suggestions follow the top hints
"""

import pytest

from ghostlens.catalog.loader import default_catalog
from ghostlens.deduction.classifier import classify
from ghostlens.deduction.hints import (
    HintPriority,
    compute_priority,
    required_equipment,
    suggest_next,
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


def small_catalog():
    return Catalog(
        entities=(
            Entity(id="a", name="A", signature=(EMF, UV, ORB)),
            Entity(id="b", name="B", signature=(EMF, SPIRIT_BOX)),
            Entity(id="c", name="C", signature=(UV, SPIRIT_BOX)),
        ),
        evidence_kinds=(EMF, UV, ORB, SPIRIT_BOX),
    )


def hints_for(catalog, state):
    return suggest_next(catalog, state, classify(catalog, state))


# =============================================================================
# PRIORITY TESTS
# =============================================================================

class TestPriority:
    """Test strict priority thresholds."""

    @pytest.mark.parametrize("distinguishing,live,priority", [
        (3, 4, HintPriority.HIGH),
        (2, 4, HintPriority.MEDIUM),   # exactly half is not high
        (1, 4, HintPriority.LOW),      # exactly a quarter is not medium
        (2, 3, HintPriority.HIGH),
        (0, 0, HintPriority.LOW),
    ])
    def test_thresholds(self, distinguishing, live, priority):
        assert compute_priority(distinguishing, live) == priority


# =============================================================================
# SMALL CATALOG TESTS
# =============================================================================

class TestSmallCatalogHints:
    """Hand-checked hints over a three-entity catalog."""

    def test_no_evidence(self):
        hints = hints_for(small_catalog(), EvidenceState())

        assert [(h.evidence, h.priority, h.elimination_power) for h in hints] == [
            (EMF, HintPriority.HIGH, 3),
            (UV, HintPriority.HIGH, 3),
            (SPIRIT_BOX, HintPriority.HIGH, 3),
            (ORB, HintPriority.MEDIUM, 2),
        ]

    def test_one_kind_confirmed(self):
        hints = hints_for(small_catalog(), EvidenceState.of(confirmed=[EMF]))

        assert [h.evidence for h in hints] == [UV, ORB, SPIRIT_BOX]
        assert all(h.priority == HintPriority.MEDIUM for h in hints)
        assert all(h.elimination_power == 2 for h in hints)
        assert all(h.distinguishing_power == 1 for h in hints)

    def test_reason_without_distinguishing_power(self):
        """Once a definite match is found, hints only report catalog splits."""
        hints = hints_for(small_catalog(), EvidenceState.of(confirmed=[EMF, SPIRIT_BOX]))

        assert [h.evidence for h in hints] == [UV, ORB]
        assert hints[0].distinguishing_power == 0
        assert hints[0].reason == "Eliminates 2 candidates"
        assert hints[0].priority == HintPriority.LOW


# =============================================================================
# REFERENCE CATALOG TESTS
# =============================================================================

class TestReferenceCatalogHints:
    """Hints over the bundled 24-ghost catalog."""

    def setup_method(self):
        self.catalog = default_catalog()

    def test_no_evidence(self):
        hints = hints_for(self.catalog, EvidenceState())

        assert [h.evidence for h in hints] == [
            SPIRIT_BOX, FREEZING, EMF, DOTS, UV, ORB, WRITING,
        ]
        assert hints[0].elimination_power == 18
        assert hints[0].max_elimination == 13
        assert hints[0].distinguishing_power == 11
        assert hints[2].elimination_power == 17
        assert all(h.priority == HintPriority.MEDIUM for h in hints)
        assert hints[0].reason == "Distinguishes between 11 remaining possibilities"

    def test_two_kinds_confirmed(self):
        state = EvidenceState.of(confirmed=[EMF, SPIRIT_BOX])
        hints = hints_for(self.catalog, state)

        assert [(h.evidence, h.elimination_power, h.priority) for h in hints] == [
            (DOTS, 8, HintPriority.MEDIUM),
            (WRITING, 8, HintPriority.MEDIUM),
            (FREEZING, 8, HintPriority.MEDIUM),
            (UV, 7, HintPriority.LOW),
            (ORB, 7, HintPriority.LOW),
        ]

    def test_confirmed_kinds_never_suggested(self):
        state = EvidenceState.of(confirmed=[EMF, UV, ORB])
        hints = hints_for(self.catalog, state)

        suggested = {h.evidence for h in hints}
        assert suggested.isdisjoint({EMF, UV, ORB})
        assert len(hints) == 4

    def test_suspected_kinds_still_suggested(self):
        state = EvidenceState.of(confirmed=[EMF], suspected=[SPIRIT_BOX])
        hints = hints_for(self.catalog, state)

        assert SPIRIT_BOX in {h.evidence for h in hints}

    def test_all_confirmed_gives_no_hints(self):
        state = EvidenceState.of(confirmed=ALL_EVIDENCE_KINDS)
        assert hints_for(self.catalog, state) == []

    def test_hint_equipment(self):
        hints = hints_for(self.catalog, EvidenceState())
        assert hints[1].equipment == "Thermometer"


# =============================================================================
# EQUIPMENT TESTS
# =============================================================================

class TestRequiredEquipment:
    """Test equipment suggestions from hints."""

    def test_top_three(self):
        state = EvidenceState.of(confirmed=[EMF, SPIRIT_BOX])
        hints = hints_for(default_catalog(), state)

        assert required_equipment(hints) == [
            "D.O.T.S. Projector", "Ghost Writing Book", "Thermometer",
        ]

    def test_custom_limit(self):
        hints = hints_for(default_catalog(), EvidenceState())
        assert required_equipment(hints, limit=1) == ["Spirit Box"]

    def test_no_hints(self):
        assert required_equipment([]) == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

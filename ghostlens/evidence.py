"""
Evidence Kinds and Evidence State — the observation vocabulary of GhostLens.

Evidence Kinds:
    A closed set of seven observation categories. Every ghost in the
    catalog is defined by a fixed signature drawn from this set.

Evidence Status:
    ABSENT     — Not yet investigated, or not found
    SUSPECTED  — Tentatively observed, never treated as ground truth
    CONFIRMED  — Verified observation, the only status used for matching

The EvidenceState is owned by the caller. The engine only ever reads a
snapshot of it; every "mutation" below returns a new state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Union


class EvidenceKind(Enum):
    """The seven evidence kinds, in display order."""
    EMF_LEVEL_5 = "EMF Level 5"
    DOTS_PROJECTOR = "D.O.T.S. Projector"
    ULTRAVIOLET = "Ultraviolet"
    GHOST_ORB = "Ghost Orb"
    GHOST_WRITING = "Ghost Writing"
    SPIRIT_BOX = "Spirit Box"
    FREEZING_TEMPERATURES = "Freezing Temperatures"


class EvidenceStatus(Enum):
    """Investigation status of a single evidence kind."""
    ABSENT = "absent"
    SUSPECTED = "suspected"
    CONFIRMED = "confirmed"


# Full universe in display order
ALL_EVIDENCE_KINDS: tuple[EvidenceKind, ...] = tuple(EvidenceKind)

# Equipment needed to detect each evidence kind
EQUIPMENT_BY_EVIDENCE = {
    EvidenceKind.EMF_LEVEL_5: "EMF Reader",
    EvidenceKind.DOTS_PROJECTOR: "D.O.T.S. Projector",
    EvidenceKind.ULTRAVIOLET: "UV Light",
    EvidenceKind.GHOST_ORB: "Video Camera",
    EvidenceKind.GHOST_WRITING: "Ghost Writing Book",
    EvidenceKind.SPIRIT_BOX: "Spirit Box",
    EvidenceKind.FREEZING_TEMPERATURES: "Thermometer",
}

# A new EvidenceKind must never fall through the equipment table
_unmapped = set(EvidenceKind) - set(EQUIPMENT_BY_EVIDENCE)
if _unmapped:
    raise RuntimeError(
        f"EQUIPMENT_BY_EVIDENCE is missing: {sorted(k.name for k in _unmapped)}"
    )

# Advance order used by EvidenceState.cycle
_CYCLE_ORDER = {
    EvidenceStatus.ABSENT: EvidenceStatus.SUSPECTED,
    EvidenceStatus.SUSPECTED: EvidenceStatus.CONFIRMED,
    EvidenceStatus.CONFIRMED: EvidenceStatus.ABSENT,
}


class EvidenceStateError(ValueError):
    """Raised when an evidence kind or status cannot be parsed."""
    pass


# =============================================================================
# PARSING
# =============================================================================

def _normalize_token(text: str) -> str:
    return "".join(ch for ch in text.lower() if ch.isalnum())


_KIND_LOOKUP = {}
for _kind in EvidenceKind:
    _KIND_LOOKUP[_normalize_token(_kind.value)] = _kind
    _KIND_LOOKUP[_normalize_token(_kind.name)] = _kind


def parse_evidence_kind(value: Union[str, EvidenceKind]) -> EvidenceKind:
    """
    Resolve an evidence kind from its display value or enum name.

    Matching ignores case, spaces and punctuation, so "D.O.T.S. Projector",
    "dots_projector" and "DOTS" all resolve. A prefix is accepted only
    when it identifies a single kind ("ghost" is rejected).

    Raises:
        EvidenceStateError: If the value names no evidence kind
    """
    if isinstance(value, EvidenceKind):
        return value

    token = _normalize_token(str(value))
    kind = _KIND_LOOKUP.get(token)
    if kind is not None:
        return kind

    matches = {k for t, k in _KIND_LOOKUP.items() if token and t.startswith(token)}
    if len(matches) == 1:
        return matches.pop()

    raise EvidenceStateError(
        f"Unknown evidence kind: {value!r}. "
        f"Expected one of: {', '.join(k.value for k in EvidenceKind)}"
    )


def parse_evidence_status(value: Union[str, EvidenceStatus]) -> EvidenceStatus:
    """
    Resolve an evidence status from its value or name.

    Raises:
        EvidenceStateError: If the value names no status
    """
    if isinstance(value, EvidenceStatus):
        return value

    token = str(value).strip().lower()
    for status in EvidenceStatus:
        if token in (status.value, status.name.lower()):
            return status

    raise EvidenceStateError(
        f"Unknown evidence status: {value!r}. "
        f"Expected one of: {', '.join(s.value for s in EvidenceStatus)}"
    )


# =============================================================================
# EVIDENCE STATE
# =============================================================================

@dataclass(frozen=True)
class EvidenceState:
    """
    Immutable snapshot of the investigator's evidence board.

    Kinds that are not present in the mapping are ABSENT. ABSENT entries
    are never stored, so two states describing the same board compare
    equal regardless of how they were built.
    """
    statuses: Mapping[EvidenceKind, EvidenceStatus] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self):
        """Normalize to a read-only mapping without ABSENT entries."""
        cleaned = {}
        for kind, status in dict(self.statuses).items():
            kind = parse_evidence_kind(kind)
            status = parse_evidence_status(status)
            if status != EvidenceStatus.ABSENT:
                cleaned[kind] = status
        object.__setattr__(self, "statuses", MappingProxyType(cleaned))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EvidenceState):
            return NotImplemented
        return dict(self.statuses) == dict(other.statuses)

    def __hash__(self) -> int:
        return hash(frozenset(self.statuses.items()))

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[Union[str, EvidenceKind], Union[str, EvidenceStatus]],
    ) -> EvidenceState:
        """Build a state from loosely typed keys and values (e.g. JSON)."""
        return cls(statuses=dict(mapping))

    @classmethod
    def of(
        cls,
        confirmed: Iterable[Union[str, EvidenceKind]] = (),
        suspected: Iterable[Union[str, EvidenceKind]] = (),
    ) -> EvidenceState:
        """
        Build a state from lists of confirmed and suspected kinds.

        A kind listed in both is CONFIRMED.
        """
        statuses: dict[EvidenceKind, EvidenceStatus] = {}
        for kind in suspected:
            statuses[parse_evidence_kind(kind)] = EvidenceStatus.SUSPECTED
        for kind in confirmed:
            statuses[parse_evidence_kind(kind)] = EvidenceStatus.CONFIRMED
        return cls(statuses=statuses)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def status(self, kind: EvidenceKind) -> EvidenceStatus:
        return self.statuses.get(kind, EvidenceStatus.ABSENT)

    def is_confirmed(self, kind: EvidenceKind) -> bool:
        return self.status(kind) == EvidenceStatus.CONFIRMED

    def confirmed(
        self,
        universe: Optional[Iterable[EvidenceKind]] = None,
    ) -> tuple[EvidenceKind, ...]:
        """Confirmed kinds, ordered by the given universe (display order by default)."""
        return self._with_status(EvidenceStatus.CONFIRMED, universe)

    def suspected(
        self,
        universe: Optional[Iterable[EvidenceKind]] = None,
    ) -> tuple[EvidenceKind, ...]:
        """Suspected kinds, ordered by the given universe."""
        return self._with_status(EvidenceStatus.SUSPECTED, universe)

    @property
    def confirmed_count(self) -> int:
        return sum(1 for s in self.statuses.values() if s == EvidenceStatus.CONFIRMED)

    def _with_status(
        self,
        status: EvidenceStatus,
        universe: Optional[Iterable[EvidenceKind]],
    ) -> tuple[EvidenceKind, ...]:
        order = list(universe) if universe is not None else list(ALL_EVIDENCE_KINDS)
        # Kinds outside the universe still count; they go last in display order
        order += [k for k in ALL_EVIDENCE_KINDS if k not in order]
        return tuple(k for k in order if self.statuses.get(k) == status)

    # -------------------------------------------------------------------------
    # Transitions (each returns a new state)
    # -------------------------------------------------------------------------

    def with_status(
        self,
        kind: Union[str, EvidenceKind],
        status: Union[str, EvidenceStatus],
    ) -> EvidenceState:
        statuses = dict(self.statuses)
        statuses[parse_evidence_kind(kind)] = parse_evidence_status(status)
        return EvidenceState(statuses=statuses)

    def cycle(
        self,
        kind: Union[str, EvidenceKind],
        max_confirmed: Optional[int] = None,
    ) -> EvidenceState:
        """
        Advance one kind: absent -> suspected -> confirmed -> absent.

        When max_confirmed kinds are already confirmed, kinds that are not
        confirmed are locked and the state is returned unchanged. Confirmed
        kinds can always be cycled back to absent.
        """
        kind = parse_evidence_kind(kind)
        current = self.status(kind)

        if (
            max_confirmed is not None
            and current != EvidenceStatus.CONFIRMED
            and self.confirmed_count >= max_confirmed
        ):
            return self

        return self.with_status(kind, _CYCLE_ORDER[current])

    def reset(self) -> EvidenceState:
        return EvidenceState()

    def to_dict(self) -> dict[str, str]:
        """Plain mapping of display value -> status value, in display order."""
        return {
            kind.value: self.statuses[kind].value
            for kind in ALL_EVIDENCE_KINDS
            if kind in self.statuses
        }


def collected_equipment(evidence_state: EvidenceState) -> list[str]:
    """Equipment that produced the confirmed evidence, without duplicates."""
    equipment: list[str] = []
    for kind in evidence_state.confirmed():
        item = EQUIPMENT_BY_EVIDENCE[kind]
        if item not in equipment:
            equipment.append(item)
    return equipment

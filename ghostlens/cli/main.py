"""
GhostLens CLI — Read-Only Interface to the Deduction Engine.

Commands:
    ghostlens ghosts                 — List the catalog
    ghostlens identify [evidence]    — Rank every ghost against the evidence
    ghostlens hints [evidence]       — Suggest which evidence to look for next
    ghostlens validate [evidence]    — Check the evidence for contradictions
    ghostlens explain <ghost> [...]  — Show how one ghost scores

Evidence is passed with repeated --confirm / --suspect options, e.g.

    ghostlens identify --confirm emf --confirm "spirit box" --suspect "ghost orb"

The CLI keeps no state between runs and cannot change scoring.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from ..catalog.loader import (
    CatalogParseError,
    default_catalog,
    load_catalog_file,
)
from ..deduction.classifier import ConfidenceBand, MatchResult
from ..deduction.hints import Hint, HintPriority
from ..domain import Catalog, CatalogError
from ..evidence import (
    EQUIPMENT_BY_EVIDENCE,
    EvidenceState,
    EvidenceStateError,
)
from .session import SessionResult, run_session


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

BAND_BADGES = {
    ConfidenceBand.DEFINITE: "[DEFINITE]",
    ConfidenceBand.VERY_LIKELY: "[LIKELY]  ",
    ConfidenceBand.POSSIBLE: "[POSSIBLE]",
    ConfidenceBand.UNLIKELY: "[UNLIKELY]",
    ConfidenceBand.IMPOSSIBLE: "[RULED OUT]",
}

PRIORITY_BADGES = {
    HintPriority.HIGH: "[HIGH]",
    HintPriority.MEDIUM: "[MED] ",
    HintPriority.LOW: "[LOW] ",
}


def format_band_badge(band: ConfidenceBand) -> str:
    return BAND_BADGES.get(band, "[?]")


def format_match_row(result: MatchResult) -> str:
    """Format a single classification row for display."""
    badge = format_band_badge(result.band)
    return (
        f"{badge} | {result.confidence:>3}% | {result.entity_name} "
        f"({result.entity_id}) | {result.reason}"
    )


def format_hint_row(hint: Hint) -> str:
    badge = PRIORITY_BADGES.get(hint.priority, "[?]")
    return (
        f"{badge} {hint.evidence.value} ({hint.equipment}) "
        f"| power {hint.elimination_power} | {hint.reason}"
    )


def format_evidence_line(state: EvidenceState) -> str:
    confirmed = ", ".join(k.value for k in state.confirmed()) or "none"
    suspected = ", ".join(k.value for k in state.suspected()) or "none"
    return f"Confirmed: {confirmed} | Suspected: {suspected}"


def format_explanation(result: MatchResult, catalog: Catalog) -> str:
    """Full explanation of how one entity scores."""
    entity = catalog.get(result.entity_id)
    lines = [
        f"{result.entity_name} — {result.confidence}% ({result.band.value})",
        "=" * 50,
        "",
        f"Reason: {result.reason}",
    ]

    if entity is not None:
        lines.append("")
        lines.append("SIGNATURE:")
        for kind in entity.signature:
            mark = "x" if kind in result.matched else " "
            lines.append(f"  [{mark}] {kind.value} ({EQUIPMENT_BY_EVIDENCE[kind]})")

    if result.missing:
        lines.append("")
        lines.append("Still missing: " + ", ".join(k.value for k in result.missing))

    if result.contradictions:
        lines.append("")
        lines.append("CONTRADICTIONS:")
        for contradiction in result.contradictions:
            lines.append(f"  • {contradiction}")

    if result.confirmation_message:
        lines.append("")
        lines.append(result.confirmation_message)

    if entity is not None:
        details = []
        if entity.difficulty is not None:
            details.append(f"Difficulty: {entity.difficulty.value}")
        if entity.hunt_sanity_threshold is not None:
            details.append(f"Hunts at: {entity.hunt_sanity_threshold}% sanity")
        if entity.movement_speed:
            details.append(f"Speed: {entity.movement_speed}")
        if entity.activity_level:
            details.append(f"Activity: {entity.activity_level}")
        if details:
            lines.append("")
            lines.append(" | ".join(details))
        if entity.description:
            lines.append(entity.description)

    return "\n".join(lines)


# =============================================================================
# INPUT HANDLING
# =============================================================================

def load_catalog(args: argparse.Namespace) -> Catalog:
    """
    Catalog from --catalog, or the bundled one.

    Rejected records are skipped; the loader logs each one.

    Raises:
        CatalogParseError: If the catalog file cannot be read
    """
    path = getattr(args, "catalog", None)
    if not path:
        return default_catalog()

    result = load_catalog_file(path)
    if result.rejected:
        print(f"Skipped {len(result.rejected)} invalid catalog records.")
    return result.catalog


def build_evidence_state(args: argparse.Namespace) -> EvidenceState:
    """
    Evidence state from --confirm / --suspect.

    Raises:
        EvidenceStateError: If an evidence kind is unknown
    """
    return EvidenceState.of(
        confirmed=getattr(args, "confirm", None) or [],
        suspected=getattr(args, "suspect", None) or [],
    )


def prepare(args: argparse.Namespace) -> tuple[Catalog, SessionResult]:
    catalog = load_catalog(args)
    state = build_evidence_state(args)
    return catalog, run_session(state, catalog)


# =============================================================================
# CLI COMMANDS
# =============================================================================

def cmd_ghosts(args: argparse.Namespace) -> int:
    """List the catalog."""
    catalog = load_catalog(args)

    print("GhostLens — Catalog")
    print("=" * 70)
    print()

    if not catalog.entities:
        print("Catalog is empty.")
        return 0

    for entity in catalog:
        evidence = ", ".join(k.value for k in entity.signature)
        print(f"{entity.name:<14} ({entity.id}) | {evidence}")

    print()
    print(f"Total: {len(catalog)} ghosts")
    return 0


def cmd_identify(args: argparse.Namespace) -> int:
    """Rank every ghost against the evidence."""
    catalog, session = prepare(args)

    print("GhostLens — Identification")
    print("=" * 70)
    print(format_evidence_line(session.evidence_state))
    print(
        f"Progress: {session.progress.collected} collected, "
        f"{session.progress.remaining} remaining ({session.progress.percentage}%)"
    )
    print()

    results = session.classification.results
    if not args.all:
        results = session.classification.remaining

    for result in results:
        print(format_match_row(result))

    eliminated = session.classification.total_eliminated
    if eliminated and not args.all:
        print(f"... {eliminated} ruled out (use --all to show)")

    print()
    print(f"STATUS: {session.status}")

    if session.recommendations:
        print()
        print("NEXT STEPS:")
        for recommendation in session.recommendations:
            print(f"  • {recommendation}")

    return 0


def cmd_hints(args: argparse.Namespace) -> int:
    """Suggest which evidence to look for next."""
    catalog, session = prepare(args)

    print("GhostLens — Next Evidence")
    print("=" * 70)
    print(format_evidence_line(session.evidence_state))
    print()

    if not session.hints:
        print("Every evidence kind is already confirmed.")
        return 0

    for hint in session.hints:
        print(format_hint_row(hint))

    if session.required_equipment:
        print()
        print("Bring: " + ", ".join(session.required_equipment))

    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Check the evidence for contradictions."""
    catalog, session = prepare(args)
    validation = session.validation

    print("GhostLens — Evidence Check")
    print("=" * 50)
    print(format_evidence_line(session.evidence_state))
    print()

    if validation.valid:
        print(f"OK: {len(validation.matching_ids)} candidates remain consistent.")
    else:
        print("INVALID: the evidence contradicts every candidate.")

    for issue in validation.issues:
        print(f"  • {issue}")

    return 0 if validation.valid else 1


def cmd_explain(args: argparse.Namespace) -> int:
    """Show how one ghost scores against the evidence."""
    catalog, session = prepare(args)

    entity = catalog.find_by_name(args.ghost)
    if entity is None:
        print(f"Ghost not found: {args.ghost}")
        print()
        print("Available ghosts:")
        for e in catalog:
            print(f"  {e.id} — {e.name}")
        return 1

    result = session.classification.get(entity.id)
    print(format_explanation(result, catalog))
    return 0


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def add_evidence_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-c", "--confirm",
        action="append",
        metavar="KIND",
        help="Confirmed evidence (repeatable)",
    )
    parser.add_argument(
        "-s", "--suspect",
        action="append",
        metavar="KIND",
        help="Suspected evidence (repeatable, does not affect scoring)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="ghostlens",
        description="GhostLens — Evidence-based ghost identification",
    )
    parser.add_argument(
        "--catalog",
        metavar="PATH",
        help="JSON catalog file (defaults to the bundled ghost catalog)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    ghosts_parser = subparsers.add_parser(
        "ghosts",
        help="List the ghost catalog",
    )
    ghosts_parser.set_defaults(func=cmd_ghosts)

    identify_parser = subparsers.add_parser(
        "identify",
        help="Rank ghosts against the evidence",
    )
    add_evidence_arguments(identify_parser)
    identify_parser.add_argument(
        "--all",
        action="store_true",
        help="Also show ghosts that are ruled out",
    )
    identify_parser.set_defaults(func=cmd_identify)

    hints_parser = subparsers.add_parser(
        "hints",
        help="Suggest which evidence to look for next",
    )
    add_evidence_arguments(hints_parser)
    hints_parser.set_defaults(func=cmd_hints)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Check the evidence for contradictions",
    )
    add_evidence_arguments(validate_parser)
    validate_parser.set_defaults(func=cmd_validate)

    explain_parser = subparsers.add_parser(
        "explain",
        help="Show how one ghost scores",
    )
    explain_parser.add_argument(
        "ghost",
        help="Ghost id or name",
    )
    add_evidence_arguments(explain_parser)
    explain_parser.set_defaults(func=cmd_explain)

    return parser


def configure_logging(verbose: bool) -> None:
    """Debug logging on request; otherwise warnings reach stderr via logging's default."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.verbose)

    try:
        return args.func(args)
    except EvidenceStateError as e:
        print(f"ERROR: {e}")
        return 1
    except (CatalogParseError, CatalogError) as e:
        print("ERROR: Catalog could not be loaded")
        print(f"Reason: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

# CLI package for GhostLens
"""
Read-only CLI interface for the deduction engine.

Commands:
    ghostlens ghosts    — List the catalog
    ghostlens identify  — Rank ghosts against the evidence
    ghostlens hints     — Suggest the next evidence to collect
    ghostlens validate  — Check the evidence for contradictions
    ghostlens explain   — Show how one ghost scores
"""

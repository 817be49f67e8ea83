# Deduction package for GhostLens
"""
Evidence-based deduction engine.

Classifies catalog entities by confidence, suggests the next evidence
to collect, and summarizes identification status. Every function is
pure: same catalog and evidence state, same result.
"""

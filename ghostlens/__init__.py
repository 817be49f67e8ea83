# GhostLens Deduction Engine

"""
Core principle: every confidence score is explainable from the evidence.

Given a catalog of ghosts (each defined by a fixed evidence signature)
and the evidence an investigator has confirmed so far, GhostLens ranks
every ghost, explains contradictions, and suggests what to look for next.
"""

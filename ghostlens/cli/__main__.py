"""
GhostLens CLI entry point.

Usage:
    python -m ghostlens.cli ghosts
    python -m ghostlens.cli identify --confirm emf --confirm "spirit box"
    python -m ghostlens.cli hints --confirm "ghost orb"
    python -m ghostlens.cli explain wraith --confirm dots
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())

# Catalog package for GhostLens
"""
Catalog providers.

Holds the bundled ghost data and the loader that turns raw records
into an immutable Catalog, rejecting malformed records explicitly.
"""

"""Game Catalog Package — item catalog, category tree, and per-user inventory.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""

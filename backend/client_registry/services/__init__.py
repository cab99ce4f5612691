"""Services Layer — imperative shell between HTTP routes and the core registry.

Invariants:
    - Services own schema ↔ domain mapping and call logging
    - No business rules here; uniqueness and checksum live in core/
"""

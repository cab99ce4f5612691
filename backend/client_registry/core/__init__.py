"""Core Layer — pure domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - Validation and search functions are pure and deterministic
    - ClientRegistry is the only holder of mutable state

Design Decisions:
    - Functional core separated from imperative shell
"""

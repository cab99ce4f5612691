"""Client Registry Application Package — in-memory client records over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

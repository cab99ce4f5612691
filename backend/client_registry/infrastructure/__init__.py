"""Infrastructure Layer — cross-cutting concerns (logging, call tracing).

Invariants:
    - Infrastructure never imports from core/ domain logic except the error base
"""

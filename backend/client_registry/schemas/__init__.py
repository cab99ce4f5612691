"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, response envelopes)
    - Schemas convert to core Client records; core never sees pydantic models
"""

"""Pydantic Schemas: request/response contracts for the HTTP boundary.

Invariants:
    - Schemas validate at system boundary; record rules live in core.validation
"""

"""Core Layer: pure domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Validation, bulk folding and response shaping are deterministic

Design Decisions:
    - Functional core separated from imperative shell: the store and the
      routes sit outside, everything here is testable without a client
"""

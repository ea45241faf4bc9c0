"""Infrastructure Layer: stateful adapters and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; core never imports from here
"""

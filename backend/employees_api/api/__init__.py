"""API Layer: FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.create_app (no auto-discovery)
    - All error responses carry {"error": <message>}

Design Decisions:
    - Thin routes delegate to the store and services
"""

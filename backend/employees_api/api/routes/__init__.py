"""Route Modules: one file per resource/concern.

Invariants:
    - Each module exposes an APIRouter (or a factory building one)
    - Routes never contain business logic (delegate to store/services)
"""

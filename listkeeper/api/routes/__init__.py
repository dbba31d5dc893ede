"""Route Modules: one file per resource.

Invariants:
    - Each module defines its own APIRouter
    - Routes hold no state; the store arrives through a dependency
"""

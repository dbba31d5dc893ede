"""Infrastructure Layer: database engine, item store and logging setup.

Invariants:
    - Infrastructure never imports from api/
    - All driver errors mapped to core.errors before leaving this layer
"""

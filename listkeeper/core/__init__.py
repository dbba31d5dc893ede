"""Core Layer: error hierarchy and the store contract. No IO, no DB.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or db/
"""

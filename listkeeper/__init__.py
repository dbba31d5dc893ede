"""listkeeper: persisted list manager behind a small JSON API.

Invariants:
    - Package root contains no executable code (no import side-effects)

Design Decisions:
    - Explicit imports only, no star exports
"""

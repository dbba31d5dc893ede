"""ORM Models: SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - Models imported here so Base.metadata is populated before create_all
"""

from listkeeper.models.item import Item  # noqa: F401

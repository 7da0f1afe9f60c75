"""Services Layer — persistence-facing operations used by route handlers.

Invariants:
    - Services own ORM queries; routes never build SQL
    - Services raise DatabaseError, never raw SQLAlchemy exceptions
"""

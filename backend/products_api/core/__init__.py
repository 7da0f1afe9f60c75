"""Core Layer — pure logic and contracts, no IO, no async IO, no DB sessions.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Envelope builders are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (ADR: ExMA impureim sandwich)
"""

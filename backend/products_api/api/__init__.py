"""API Layer — FastAPI routes, envelope decorators and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Read routes return enveloped JSON; create returns the bare record

Design Decisions:
    - Thin routes delegate to services (ADR: ExMA impureim sandwich)
"""

"""Infrastructure Layer — database session management and logging setup.

Invariants:
    - Infrastructure never imports route or service modules
    - Driver exceptions are mapped to DatabaseError before leaving this layer

Design Decisions:
    - Engine lifecycle owned here, started and stopped by the app lifespan
"""

"""Infrastructure Layer - database engine, logging, token and password security.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Driver and library errors are mapped to core/errors.py types at this layer
"""

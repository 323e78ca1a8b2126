"""Core Layer - pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Validators are pure and deterministic; persistence is reached only through
      the Protocols in repository_protocols.py
"""

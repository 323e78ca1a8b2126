"""Services Layer - coin workflows, account queries, identity, SQL stores.

Invariants:
    - Every mutating workflow runs inside one atomic unit (services/atomic_unit.py)
    - Workflows receive their stores through the constructor, never via globals
"""

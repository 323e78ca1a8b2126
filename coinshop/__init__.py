"""Coin Shop Application Package - virtual-currency marketplace backend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

"""
Country tipping table.

Responsibilities:
- Locate and load the static country tipping data.
- Resolve a country name to its tipping profile.
- Signal unknown countries with ``ProfileNotFound`` so callers can short-circuit.
"""

"""
Tip recommendation engine.

Responsibilities:
- Accept a country tipping profile plus service and food ratings.
- Derive a recommended tip percentage with deterministic rules.
- Explain the recommendation and match it against the preset tip buttons.
"""

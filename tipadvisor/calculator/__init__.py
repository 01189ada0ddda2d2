"""
Bill calculator: tip amount, total and per-person split.
"""

"""
tipadvisor: tip calculation and rule-based tip recommendations over HTTP.
"""

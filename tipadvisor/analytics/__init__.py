"""
In-memory usage analytics for recommendations and bill calculations.
"""

"""
Per-client fixed-window rate limiting for the recommendation endpoint.
"""

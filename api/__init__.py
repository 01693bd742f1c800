"""
API package - HTTP routing, dependencies and middleware.
"""

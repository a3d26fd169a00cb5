"""
API layer for the ProCircle backend.

Exposes the HTTP endpoints under /api (users and posts).
"""

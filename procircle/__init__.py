"""
ProCircle Backend root package.

A small social network API: users register and sign in, publish short text
posts, like them and comment on them. Contains the FastAPI entry point
(main.py), API routes, domain logic and the MongoDB infrastructure.
"""

"""
Domain layer: entities, repository contracts, error taxonomy and the
UserDirectory / PostFeed services. Nothing here depends on FastAPI or Motor.
"""

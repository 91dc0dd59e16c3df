"""
HTTP layer: FastAPI application, routers, schemas and middleware.
"""

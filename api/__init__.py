"""api/ -- FastAPI application, routers, and transport models."""

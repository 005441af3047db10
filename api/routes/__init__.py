"""api/routes/ -- FastAPI routers mounted by api/main.py."""

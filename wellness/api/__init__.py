"""
API module - HTTP layer.

- main.py   : FastAPI application, middleware and exception handlers
- routes/   : Endpoint definitions
"""

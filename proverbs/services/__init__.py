"""
High-level use cases for the proverbs app.

Routers (FastAPI endpoints) call these services instead of manipulating the
JSON store directly.
"""

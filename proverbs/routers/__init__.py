"""
FastAPI routers.

Each module exposes an APIRouter that is included by proverbs.app.
"""

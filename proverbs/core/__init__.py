"""
Core utilities shared across the proverbs app.

This package hosts configuration helpers (env vars, paths) and small
cross-cutting helpers used by routers and services.
"""

"""Proverbs: a small JSON-backed web app for Dari/Pashto proverbs."""

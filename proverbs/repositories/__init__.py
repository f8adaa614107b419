"""
Persistence adapters.

Services depend on the store interface rather than touching the JSON file.
"""

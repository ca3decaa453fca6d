"""Infrastructure layer — repository ports and their in-memory implementations.

This layer may import from domain (records, lookups, errors) only.
It must never import from services, api, commands, or output.
"""

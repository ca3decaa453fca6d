"""Domain layer — records, resource types, lookups and errors.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, api, commands, or config.
"""

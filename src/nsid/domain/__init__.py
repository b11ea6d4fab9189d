"""Domain layer — namespaces, the KSUID value, and identifiers.

This layer depends only on stdlib and pydantic.
It must never import from services, config, commands, or output.
"""

"""Domain layer — entities, error kinds, and the raise/recover core.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, or config.
"""

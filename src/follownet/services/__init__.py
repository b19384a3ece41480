"""Service layer — use-cases composed from the raise/recover core.

Services may import from domain and infrastructure layers.
They must never import from config.
"""

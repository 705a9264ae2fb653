"""Domain layer — notation, canonical models, and the validator engine.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""

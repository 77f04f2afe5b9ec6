"""Domain layer — styles, sides, identifiers, and the token parser.

This layer depends only on stdlib.
It must never import from services, output, commands, or config.
"""

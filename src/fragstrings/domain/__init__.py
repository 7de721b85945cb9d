"""Domain layer: descriptor grammar, schema types, and the codec.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""

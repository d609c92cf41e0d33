"""Domain layer — graph types and the traversal algorithm.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""

"""Infrastructure layer — graph document loading and NetworkX adapters.

This layer depends on stdlib and third-party libs (NetworkX).
It must never import from services, commands, or output.
"""

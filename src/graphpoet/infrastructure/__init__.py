"""Infrastructure layer — corpus files and the lazy poet engine.

This layer may import from the domain layer, never from services,
commands, or output.
"""

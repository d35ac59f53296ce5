"""
Repository layer - Data access abstractions.

This layer provides interfaces for customer and employee persistence,
hiding storage details from the application managers.
"""

"""
Infrastructure layer - adapters for collaborators outside the domain.
"""

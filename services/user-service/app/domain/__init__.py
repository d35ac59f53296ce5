"""
Domain layer - Core business entities and domain logic.

This layer contains the customer and employee aggregates and their
validation rules, independent of any infrastructure or framework concerns.
"""

"""
Domain Layer

This package contains the presentation-independent business rules of the
dashboard, separated from persistence and transport concerns.

Structure:
- value_objects/: Immutable value types (money, pagination)
"""

"""
Data Transfer Objects

Typed records that leave the data layer.

Structure:
- response/: DTOs returned by dashboard fetches
"""

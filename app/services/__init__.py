"""
Services Layer

Business logic for the shop resources. Core services implement the CRUD
request pipeline on top of the repository and storage infrastructure.
"""

__all__ = []

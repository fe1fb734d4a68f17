"""
Repository Infrastructure Module

Store access for resources plus the search/pagination helpers used by list
endpoints.
"""

from .base import ResourceRepository
from .sqlalchemy_repository import SQLAlchemyRepository
from .query import PageWindow, build_filter, build_page, total_pages

__all__ = [
    'ResourceRepository',
    'SQLAlchemyRepository',
    'PageWindow',
    'build_filter',
    'build_page',
    'total_pages',
]

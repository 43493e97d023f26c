"""
Services Layer

Business logic services. Core services handle basic CRUD operations.
"""

from .core import ClassService

__all__ = ["ClassService"]

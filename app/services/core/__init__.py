"""
Core Services Module

Provides the CRUD service for lecturer class records.
"""

from .class_service import ClassService

__all__ = ["ClassService"]

"""
API Dependencies

Provides dependency injection for services and database sessions.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.services import ClassService


def get_class_service(db: Session = Depends(get_db)) -> ClassService:
    """
    Get Class Service instance with database session

    Returns:
        ClassService: Configured class record service
    """
    return ClassService(db=db)

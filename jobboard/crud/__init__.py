"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer provides a clean separation between API routes and database operations,
following the Repository pattern.
"""

from jobboard.crud import application, company, job, user

__all__ = ["application", "company", "job", "user"]

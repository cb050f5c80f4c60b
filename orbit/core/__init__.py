"""
Core Package - Orbit Leadership Assessment
orbit/core/__init__.py

Core infrastructure: exceptions, logging setup.
Dependencies live in orbit.core.dependencies (imported by routers directly).
"""

from orbit.core.exceptions import (
    AssessmentStateException,
    CatalogFormatException,
    DuplicateEntityException,
    EntityNotFoundException,
    RepositoryException,
)

__all__ = [
    "AssessmentStateException",
    "CatalogFormatException",
    "DuplicateEntityException",
    "EntityNotFoundException",
    "RepositoryException",
]

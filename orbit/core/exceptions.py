"""
Custom Exceptions - Orbit Leadership Assessment
orbit/core/exceptions.py

Exception classes for repository and assessment lifecycle operations.
The scoring engine itself never raises; these cover the data-access layer.
"""


class RepositoryException(Exception):
    """Base exception for repository operations."""

    pass


class EntityNotFoundException(RepositoryException):
    """Entity not found in the store."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with ID {entity_id} not found")


class DuplicateEntityException(RepositoryException):
    """Duplicate entity violation."""

    def __init__(self, message: str = "Entity already exists"):
        self.message = message
        super().__init__(message)


class AssessmentStateException(RepositoryException):
    """Requested change is not allowed in the assessment's current state."""

    def __init__(self, message: str = "Invalid assessment state transition"):
        self.message = message
        super().__init__(message)


class CatalogFormatException(Exception):
    """Question catalog JSON could not be loaded."""

    def __init__(self, message: str = "Invalid question catalog"):
        self.message = message
        super().__init__(message)

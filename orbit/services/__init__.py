"""
Services Package - Orbit Leadership Assessment
orbit/services/__init__.py
"""

from orbit.services.assessment_service import AssessmentService

__all__ = [
    "AssessmentService",
]

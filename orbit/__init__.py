"""
Orbit Leadership Assessment
orbit/__init__.py

Multi-rater self-assessment scoring service.
"""

__version__ = "1.0.0"

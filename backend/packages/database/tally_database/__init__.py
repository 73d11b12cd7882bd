"""
Tally Database Package.

This package contains SQLAlchemy models, session management
and migrations for the Tally application.
"""

__version__ = "0.1.0"

from .models import Base

__all__ = ["Base"]

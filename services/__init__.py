"""
Application services layer.

Caller-facing result type and error codes shared by the balancing entry point.
"""

# Result type for consistent error handling
from services.result import Result

__all__ = ["Result"]

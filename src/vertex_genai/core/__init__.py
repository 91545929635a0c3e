"""Core value types shared across the client."""

from .types import Failure, Result, Success

__all__ = ["Failure", "Result", "Success"]

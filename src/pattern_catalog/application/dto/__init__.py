"""Data transfer objects."""

from .base import BaseDTO

__all__ = ['BaseDTO']

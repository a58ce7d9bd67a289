"""Wrappers for /v1/users/me/contacts resources."""
from .tag import Tag

__all__ = ["Tag"]

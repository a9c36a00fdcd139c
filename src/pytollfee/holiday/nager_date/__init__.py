"""Nager.Date public holiday provider."""

from .api import Provider

__all__ = ["Provider"]

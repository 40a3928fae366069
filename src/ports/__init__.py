"""Ports (interfaces) for the application.

This module contains Protocol definitions that define the boundaries between
the selection core and the platform it runs on.
"""

from src.ports.resources import ResourceBundle

__all__ = [
    "ResourceBundle",
]

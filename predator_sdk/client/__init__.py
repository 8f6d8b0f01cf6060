"""
Client module for the Predator SDK.

This module provides the high-level client interface for callers.
"""

from .predator_client import PredatorClient, parse_percentage

__all__ = [
    "PredatorClient",
    "parse_percentage",
]

"""Core module for meet-uri."""

from core.models import (
    ParsedURI,
    ParsedLocation,
)
from core.config import ParserConfig

__all__ = [
    "ParsedURI",
    "ParsedLocation",
    "ParserConfig",
]

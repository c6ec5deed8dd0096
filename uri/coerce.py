"""Coerce URL-like values (strings, URL objects, config objects) to a string."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import ParseResult, SplitResult

from pydantic import AnyUrl

from core.models import ParsedURI


def _url_object_to_string(obj: Any) -> Any:
    """Return the 'url' of a config object (mapping key or attribute), if any."""
    if isinstance(obj, Mapping):
        return obj.get("url")
    return getattr(obj, "url", None)


def to_url_string(obj: Any) -> str | None:
    """
    Return a string representation of a value that is supposed to represent a URL.

    - str: returned as a plain str
    - URL objects (pydantic URLs, urllib split/parse results, ParsedURI): their href
    - config objects carrying a 'url' (mapping key or attribute): that value
    - anything else: None
    """
    if isinstance(obj, str):
        return str(obj)
    if obj is None:
        return None
    if isinstance(obj, AnyUrl):
        return str(obj)
    if isinstance(obj, (SplitResult, ParseResult)):
        return obj.geturl()
    if isinstance(obj, ParsedURI):
        return obj.to_uri_string()
    return _url_object_to_string(obj)

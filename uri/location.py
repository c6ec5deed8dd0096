"""Meeting location parsing: normalization passes plus room derivation."""

from __future__ import annotations

from typing import Any

from core.models import ParsedLocation
from uri.hierpart import fix_uri_hier_part
from uri.scheme import fix_uri_scheme
from uri.standard import parse_standard_uri


def get_context_root(pathname: str) -> str:
    """Return the (web application) context root: pathname up to and including its last '/'."""
    context_root_end = pathname.rfind("/")
    if context_root_end == -1:
        return "/"
    return pathname[:context_root_end + 1]


def parse_location_uri(uri: Any) -> ParsedLocation | None:
    """
    Parse a URI which (supposedly) references a meeting room.

    Non-string input yields None ("no location"). Strings go through scheme
    normalization, legacy hier-part rewriting and standard parsing, in that
    order; the room is the last pathname segment.
    """
    if not isinstance(uri, str):
        return None

    parsed = parse_standard_uri(fix_uri_hier_part(fix_uri_scheme(uri)))

    pathname = parsed.pathname
    context_root = get_context_root(pathname)
    room = pathname[len(context_root):] or None

    return ParsedLocation(
        **parsed.model_dump(),
        context_root=context_root,
        room=room,
    )

"""Scheme normalization for app-specific deep links."""

from __future__ import annotations

import re

from core.config import ParserConfig


_WELL_KNOWN = "|".join(re.escape(p) for p in sorted(ParserConfig.WELL_KNOWN_PROTOCOLS))

# One or more scheme tokens stacked at the start, e.g. "org.jitsi.meet:https:".
# A token may also be separated by "//" from a following http(s) URL, as in
# "org.jitsi.meet://https://host/room"; "https://http:8080" stays a host and port.
_SCHEME_RUN_RE = re.compile(
    rf"^(?:{ParserConfig.PROTOCOL_PATTERN}(?://(?=(?:{_WELL_KNOWN})//))?)+",
    re.IGNORECASE,
)


def fix_uri_scheme(uri: str) -> str:
    """
    Collapse leading scheme tokens into one well-known scheme.

    The mobile app registers its own URI scheme next to universal links, and
    that scheme may precede or replace http(s). The last token of the run is
    picked and anything that is not http/https becomes the default protocol.

    A scheme is only re-attached when an authority ("//") follows; a bare
    room name keeps no scheme at all.
    """
    match = _SCHEME_RUN_RE.match(uri)
    if not match:
        return uri

    # Last repetition of the group wins.
    protocol = match.group(1).lower()
    if protocol not in ParserConfig.WELL_KNOWN_PROTOCOLS:
        protocol = ParserConfig.DEFAULT_PROTOCOL

    remainder = uri[match.end():]
    if remainder.startswith("//"):
        return protocol + remainder
    return remainder

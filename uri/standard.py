"""Permissive parser for standard (http-like) URI strings."""

from __future__ import annotations

import re

from core.config import ParserConfig
from core.models import ParsedURI


_PROTOCOL_RE = re.compile(rf"^{ParserConfig.PROTOCOL_PATTERN}", re.IGNORECASE)
_AUTHORITY_RE = re.compile(rf"^{ParserConfig.AUTHORITY_PATTERN}", re.IGNORECASE)
_PATH_RE = re.compile(rf"^{ParserConfig.PATH_PATTERN}", re.IGNORECASE)


def _match_prefix(pattern: re.Pattern[str], text: str, pos: int) -> tuple[str | None, int]:
    """Try pattern at pos; return (captured group or None, position after the match)."""
    match = pattern.match(text[pos:])
    if not match:
        return None, pos
    return match.group(1), pos + match.end()


def _split_authority(authority: str) -> tuple[str, str, str | None]:
    """Split 'userinfo@hostname:port' into (host, hostname, port)."""
    # userinfo
    userinfo_end = authority.rfind("@")
    if userinfo_end != -1:
        authority = authority[userinfo_end + 1:]
    host = authority

    # port
    port = None
    port_begin = authority.rfind(":")
    if port_begin != -1:
        port = authority[port_begin + 1:]
        authority = authority[:port_begin]

    return host, authority, port


def parse_standard_uri(uri: str) -> ParsedURI:
    """
    Parse a URI string into the well-known Location/URL properties.

    Consumption is strictly left to right: scheme, authority, path, query,
    fragment. Every stage is optional, so any string parses; absent parts keep
    their defaults (pathname "/", search "", hash "").
    """
    fields: dict[str, str | None] = {}
    pos = 0

    protocol, pos = _match_prefix(_PROTOCOL_RE, uri, pos)
    if protocol is not None:
        fields["protocol"] = protocol.lower()

    authority, pos = _match_prefix(_AUTHORITY_RE, uri, pos)
    if authority is not None:
        host, hostname, port = _split_authority(authority[2:])
        fields["host"] = host
        fields["hostname"] = hostname
        fields["port"] = port

    pathname, pos = _match_prefix(_PATH_RE, uri, pos)
    if pathname:
        if not pathname.startswith("/"):
            pathname = "/" + pathname
    else:
        pathname = "/"
    fields["pathname"] = pathname

    rest = uri[pos:]

    # query
    search = ""
    if rest.startswith("?"):
        hash_begin = rest.find("#", 1)
        if hash_begin == -1:
            hash_begin = len(rest)
        search = rest[:hash_begin]
        rest = rest[hash_begin:]
    fields["search"] = search

    # fragment
    fields["hash"] = rest if rest.startswith("#") else ""

    return ParsedURI(**fields)

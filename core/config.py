"""
Default parser configuration for meet-uri.

These settings are IMMUTABLE and describe the URI grammar subset the parser
understands plus the legacy deployments it knows how to translate.

Design: Everything is permissive. The parser never rejects input, so nothing
here is a validation rule; it only decides how input gets normalized.
"""

from typing import Set


class ParserConfig:
    """
    Immutable parser settings.

    Patterns are regex source strings; they are compiled (case-insensitive) by
    the modules that consume them.
    """

    # ========================================================================
    # URI Grammar Subset
    # ========================================================================

    # scheme ":" (RFC 3986 section 3.1), colon included
    PROTOCOL_PATTERN: str = r"([a-z][a-z0-9.+-]*:)"
    """Pattern of one scheme token including its trailing colon."""

    # "//" authority, userinfo and port still attached
    AUTHORITY_PATTERN: str = r"(//[^/?#]+)"
    """Pattern of the authority including the leading '//'."""

    PATH_PATTERN: str = r"([^?#]*)"
    """Pattern of the path (may be empty)."""

    # ========================================================================
    # Scheme Normalization
    # ========================================================================

    WELL_KNOWN_PROTOCOLS: Set[str] = {"http:", "https:"}
    """Schemes kept as-is. Any other scheme (app-specific deep links) is replaced."""

    DEFAULT_PROTOCOL: str = "https:"
    """Scheme substituted for app-specific schemes."""

    # ========================================================================
    # Legacy Deployments
    # ========================================================================

    # hipchat.com and enso.me do not follow the <host>/<room> layout
    LEGACY_DEPLOYMENT_HOST: str = "enso.hipchat.me"
    """Host that legacy deployment URIs are rewritten to."""

    @classmethod
    def validate(cls) -> None:
        """
        Validate configuration at startup.

        Raises:
            AssertionError: If any constraint is violated.
        """
        assert (
            cls.DEFAULT_PROTOCOL in cls.WELL_KNOWN_PROTOCOLS
        ), "DEFAULT_PROTOCOL must be one of WELL_KNOWN_PROTOCOLS"

        assert (
            all(p.endswith(":") and p == p.lower() for p in cls.WELL_KNOWN_PROTOCOLS)
        ), "WELL_KNOWN_PROTOCOLS must be lowercase and end with ':'"

        assert (
            cls.LEGACY_DEPLOYMENT_HOST
            and not any(c in cls.LEGACY_DEPLOYMENT_HOST for c in "/?#@")
        ), "LEGACY_DEPLOYMENT_HOST must be a bare host"


# Validate at module import time
ParserConfig.validate()

"""Hier-part rewrites for legacy deployments with non-standard URI layouts."""

from __future__ import annotations

import re
from dataclasses import dataclass

from core.config import ParserConfig


@dataclass(frozen=True)
class HierPartRule:
    """One legacy deployment: a prefix matcher and the canonical authority it maps to."""

    name: str
    matcher: re.Pattern[str]
    authority: str = ParserConfig.LEGACY_DEPLOYMENT_HOST

    def rewrite(self, uri: str) -> str | None:
        """Return the rewritten URI, or None when this rule does not apply."""
        match = self.matcher.match(uri)
        if not match:
            return None
        # match.group(1) is the scheme token, kept verbatim.
        return f"{match.group(1)}//{self.authority}/{uri[match.end():]}"


def _legacy_matcher(authority_and_path: str) -> re.Pattern[str]:
    """Compile an anchored, case-insensitive '<scheme>//<authority_and_path>' matcher."""
    return re.compile(
        rf"^{ParserConfig.PROTOCOL_PATTERN}//{authority_and_path}",
        re.IGNORECASE,
    )


# Evaluated in order, first match wins.
LEGACY_RULES: tuple[HierPartRule, ...] = (
    HierPartRule(
        name="hipchat.com",
        matcher=_legacy_matcher(r"hipchat\.com/video/call/"),
    ),
    HierPartRule(
        name="enso.me",
        matcher=_legacy_matcher(r"enso\.me/(?:call|meeting)/"),
    ),
)


def fix_uri_hier_part(uri: str, rules: tuple[HierPartRule, ...] = LEGACY_RULES) -> str:
    """
    Translate URIs of unconventional deployments into the <host>/<room> layout.

    For example "https://hipchat.com/video/call/room" becomes
    "https://enso.hipchat.me/room". Input matching no rule is returned unchanged.
    """
    for rule in rules:
        rewritten = rule.rewrite(uri)
        if rewritten is not None:
            return rewritten
    return uri

"""URI utilities: scheme/hier-part normalization and permissive parsing."""

from uri.coerce import to_url_string
from uri.hierpart import LEGACY_RULES, HierPartRule, fix_uri_hier_part
from uri.location import get_context_root, parse_location_uri
from uri.scheme import fix_uri_scheme
from uri.standard import parse_standard_uri

__all__ = [
    "to_url_string",
    "LEGACY_RULES",
    "HierPartRule",
    "fix_uri_hier_part",
    "get_context_root",
    "parse_location_uri",
    "fix_uri_scheme",
    "parse_standard_uri",
]

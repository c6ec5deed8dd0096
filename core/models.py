"""
Core Pydantic models for meet-uri.

Design principles:
- Records mirror the conventional {protocol, host, hostname, port, pathname,
  search, hash} URI model, so callers can treat them like a browser Location
- Every record is frozen: built once per parse call, never mutated
- No field is percent-decoded or re-encoded
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ============================================================================
# Standard URI
# ============================================================================

class ParsedURI(BaseModel):
    """
    A URI split into the well-known Location/URL properties.

    Example:
      protocol = "https:"
      host = "meet.example.com:8443"
      hostname = "meet.example.com"
      port = "8443"
      pathname = "/Room123"
      search = "?x=1"
      hash = "#frag"
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    protocol: Optional[str] = None  # Lowercase, ends with ":"
    host: Optional[str] = None  # hostname[:port], userinfo removed
    hostname: Optional[str] = None
    port: Optional[str] = None  # Text after the last ":" of the authority

    pathname: str = "/"
    search: str = ""  # "" or starts with "?"
    hash: str = ""  # "" or starts with "#"

    @field_validator("pathname")
    @classmethod
    def validate_pathname_rooted(cls, v: str) -> str:
        """Ensure pathname always starts with "/"."""
        if not v.startswith("/"):
            return "/" + v
        return v

    def to_uri_string(self) -> str:
        """Render the canonical string form: scheme, authority, path, query, fragment."""
        authority = "//" + self.host if self.host is not None else ""
        return (self.protocol or "") + authority + self.pathname + self.search + self.hash


# ============================================================================
# Meeting Location
# ============================================================================

class ParsedLocation(ParsedURI):
    """
    A ParsedURI that (supposedly) references a meeting room.

    - context_root: pathname up to and including its last "/"
    - room: the last pathname segment, None when empty

    context_root + (room or "") == pathname always holds.
    """
    context_root: str = Field(default="/", alias="contextRoot")
    room: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "protocol": "https:",
                    "host": "meet.example.com",
                    "hostname": "meet.example.com",
                    "port": None,
                    "pathname": "/Room123",
                    "search": "",
                    "hash": "",
                    "contextRoot": "/",
                    "room": "Room123"
                }
            ]
        }
    )

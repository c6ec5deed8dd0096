"""Unit tests for core/models.py and uri/coerce.py."""

from __future__ import annotations

from types import SimpleNamespace
from urllib.parse import urlparse, urlsplit

import pytest
from pydantic import AnyUrl, HttpUrl, TypeAdapter, ValidationError

from core.models import ParsedLocation, ParsedURI
from uri.coerce import to_url_string


# ============================================================================
# Models
# ============================================================================

@pytest.mark.unit
def test_records_are_frozen(sample_location: ParsedLocation):
    """Records cannot be mutated after construction."""
    with pytest.raises(ValidationError):
        sample_location.room = "Other"


@pytest.mark.unit
def test_defaults_match_empty_uri():
    """An empty record has pathname '/', empty search/hash and no authority."""
    record = ParsedURI()

    assert record.protocol is None
    assert record.host is None
    assert record.pathname == "/"
    assert record.search == ""
    assert record.hash == ""


@pytest.mark.unit
def test_pathname_is_rooted():
    """A relative pathname gets its leading '/'."""
    assert ParsedURI(pathname="Room123").pathname == "/Room123"


@pytest.mark.unit
def test_location_serializes_context_root_by_alias(sample_location: ParsedLocation):
    """JSON output uses the Location-style 'contextRoot' key."""
    data = sample_location.model_dump(mode="json", by_alias=True)

    assert data["contextRoot"] == "/"
    assert "context_root" not in data
    assert ParsedLocation.model_validate(data) == sample_location


@pytest.mark.unit
def test_to_uri_string(sample_parsed_uri: ParsedURI):
    """Canonical form is scheme + '//' + host + pathname + search + hash."""
    assert sample_parsed_uri.to_uri_string() == "https://meet.example.com:8443/base/Room123?x=1#frag"
    assert ParsedURI(pathname="/Room123").to_uri_string() == "/Room123"
    assert ParsedURI(host="h", pathname="/r").to_uri_string() == "//h/r"


# ============================================================================
# to_url_string
# ============================================================================

@pytest.mark.unit
def test_strings_pass_through():
    """Plain strings come back unchanged, as plain str."""
    class Link(str):
        pass

    assert to_url_string("https://meet.example.com/Room123") == "https://meet.example.com/Room123"
    assert to_url_string("Room123") == "Room123"
    assert to_url_string("") == ""
    assert type(to_url_string(Link("Room123"))) is str


@pytest.mark.unit
def test_pydantic_url_uses_href():
    """pydantic URL values are rendered with str()."""
    url = TypeAdapter(AnyUrl).validate_python("https://meet.example.com/Room123?x=1")

    assert to_url_string(url) == "https://meet.example.com/Room123?x=1"


@pytest.mark.unit
def test_pydantic_http_url_subtype_uses_href():
    """Stricter pydantic URL types are AnyUrl subclasses and render the same way."""
    url = TypeAdapter(HttpUrl).validate_python("https://meet.example.com:8443/Room123")

    assert to_url_string(url) == "https://meet.example.com:8443/Room123"


@pytest.mark.unit
def test_urllib_results_use_geturl():
    """urllib split/parse results are rendered with geturl()."""
    assert to_url_string(urlsplit("https://meet.example.com/Room123")) == "https://meet.example.com/Room123"
    assert to_url_string(urlparse("https://meet.example.com/Room123")) == "https://meet.example.com/Room123"


@pytest.mark.unit
def test_parsed_record_uses_canonical_form(sample_location: ParsedLocation):
    """Parsed records are rendered with to_uri_string()."""
    assert to_url_string(sample_location) == "https://meet.example.com/Room123"


@pytest.mark.unit
def test_config_objects_yield_their_url():
    """Mappings and objects carrying 'url' return that value."""
    assert to_url_string({"url": "https://meet.example.com/Room123", "room": "x"}) == (
        "https://meet.example.com/Room123"
    )
    assert to_url_string(SimpleNamespace(url="https://meet.example.com/r")) == "https://meet.example.com/r"


@pytest.mark.unit
@pytest.mark.parametrize("value", [None, 42, True, 1.5, object(), {"room": "x"}, [], SimpleNamespace()])
def test_unsupported_values_yield_none(value):
    """Anything else has no string representation."""
    assert to_url_string(value) is None

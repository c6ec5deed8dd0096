"""Structured JSON logging helpers for parse results and CLI events."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any

from core.models import ParsedURI


def record_to_dict(record: ParsedURI | None) -> dict[str, Any] | None:
    """Convert a parsed record to a JSON-safe dictionary keyed by Location names."""
    if record is None:
        return None
    return record.model_dump(mode="json", by_alias=True)


def _render(event: dict[str, Any]) -> str:
    """Render one event as a stable, ASCII-only JSON line."""
    return json.dumps(event, ensure_ascii=True, sort_keys=True, default=str)


def emit_json_event(
    event_type: str,
    *,
    run_id: str | None,
    level: str = "info",
    **payload: Any,
) -> str:
    """Emit one JSON event line to stdout and return the rendered line."""
    event: dict[str, Any] = {
        "event_type": event_type,
        "level": level,
        "timestamp": datetime.now(UTC).isoformat(),
        "run_id": run_id,
    }
    event.update(payload)
    line = _render(event)
    print(line)
    return line


def emit_parse_result(
    uri: Any,
    record: ParsedURI | None,
    *,
    run_id: str | None,
) -> str:
    """Emit the parse result for one input and return it for testability."""
    return emit_json_event(
        "parse_result",
        run_id=run_id,
        input=uri,
        result=record_to_dict(record),
    )

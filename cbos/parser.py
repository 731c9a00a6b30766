"""Parsing of framed API requests and building of the JSON replies."""

from __future__ import annotations

import json
import logging

logger = logging.getLogger(__name__)

UNKNOWN_API = "Unknown"
FRAME_START = "<"
FRAME_END = ">"


def _reject_constant(name: str) -> None:
    raise ValueError(f"invalid JSON literal {name!r}")


def _to_text(data: str | bytes | bytearray | memoryview) -> str:
    """Return the text up to the first NUL, as a received buffer would hold it."""
    if isinstance(data, (bytes, bytearray, memoryview)):
        raw = bytes(data).split(b"\0", 1)[0]
        return raw.decode("utf-8", errors="surrogateescape")
    return data.split("\0", 1)[0]


def _extract_payload(text: str) -> str | None:
    start = text.find(FRAME_START)
    end = text.find(FRAME_END)
    if start == -1 or end == -1 or start >= end:
        return None
    return text[start + 1 : end]


def _read_request(payload: str) -> tuple[str, int]:
    payload.encode("utf-8")  # undecodable input is not valid JSON text
    parsed = json.loads(payload, parse_constant=_reject_constant)
    if not isinstance(parsed, dict):
        raise ValueError("request is not a JSON object")

    name = parsed.get("Api_Name")
    if not isinstance(name, str):
        raise ValueError("Api_Name must be a string")
    name.encode("utf-8")

    version = parsed.get("Api_Version")
    if not isinstance(version, (int, float)):
        raise ValueError("Api_Version must be a number")
    return name, int(version)


def generate_response(api_name: str, version: int, is_valid: bool) -> str:
    """Build the compact JSON reply for a request."""
    response = {
        "Api_Name": api_name,
        "Api_Version": version,
        "Is_Valid": is_valid,
        "Data": "none",
    }
    return json.dumps(
        response, sort_keys=True, separators=(",", ":"), ensure_ascii=False
    )


def parse_frame(data: str | bytes | bytearray | memoryview) -> str:
    """Parse a ``<{json}>`` frame and return the JSON reply for it.

    Malformed frames and unusable JSON yield a reply marked invalid.
    """
    payload = _extract_payload(_to_text(data))
    if payload is None:
        return generate_response(UNKNOWN_API, 0, False)

    try:
        api_name, version = _read_request(payload)
    except (ValueError, OverflowError) as exc:
        logger.error("JSON Parse error: %s", exc)
        return generate_response(UNKNOWN_API, 0, False)

    return generate_response(api_name, version, True)
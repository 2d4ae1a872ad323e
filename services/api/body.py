# services/api/body.py
# Request body reading shared by every POST route.
# JSON and URL-encoded bodies are accepted, anything else reads as {}.

import json

from fastapi import Request

from shared.utils.form_parser import parse_form


class RequestBodyError(Exception):
    """Body rejected before it reaches a handler (too large or unparseable)."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message     = message


async def _read_limited(request: Request, limit: int) -> bytes:
    """Reads the body chunk by chunk, giving up as soon as it passes limit."""
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > limit:
        raise RequestBodyError(413, "request entity too large")

    raw = bytearray()
    async for chunk in request.stream():
        raw.extend(chunk)
        if len(raw) > limit:
            raise RequestBodyError(413, "request entity too large")
    return bytes(raw)


async def read_body(request: Request) -> dict:
    raw = await _read_limited(request, request.app.state.settings.max_body_bytes)
    if not raw:
        return {}

    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    if content_type == "application/json" or content_type.endswith("+json"):
        try:
            data = json.loads(raw)
        except (ValueError, UnicodeDecodeError) as e:
            raise RequestBodyError(400, str(e)) from e
        except RecursionError:
            raise RequestBodyError(400, "JSON body is nested too deeply")
        if not isinstance(data, (dict, list)):
            raise RequestBodyError(400, "JSON body must be an object or an array")
        # Arrays carry none of the allow-listed fields
        return data if isinstance(data, dict) else {}

    if content_type == "application/x-www-form-urlencoded":
        try:
            return parse_form(raw.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise RequestBodyError(400, str(e)) from e

    return {}

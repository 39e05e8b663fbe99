import json
import sys
from datetime import datetime, timezone
from typing import Dict, Iterable, Optional


def iso_timestamp() -> str:
    """UTC timestamp for structured CLI output."""
    return datetime.now(timezone.utc).isoformat()


def structured_response(
    command: str,
    *,
    status: str = "OK",
    message: str = "",
    payload: Optional[Dict] = None,
    summary: Optional[str] = None,
    exit_code: int = 0,
) -> int:
    """Unified JSON response for non-interactive commands."""
    body: Dict[str, object] = {
        "command": command,
        "status": status,
        "message": message,
        "timestamp": iso_timestamp(),
        "payload": payload or {},
    }
    if summary:
        body["summary"] = summary
    print(json.dumps(body, ensure_ascii=False, indent=2))
    return exit_code


def structured_error(command: str, message: str, *, payload: Optional[Dict] = None, status: str = "ERROR") -> int:
    """Short-hand for structured error responses."""
    return structured_response(command, status=status, message=message, payload=payload, exit_code=1)


def emit(
    args,
    command: str,
    *,
    message: str = "",
    payload: Optional[Dict] = None,
    lines: Iterable[str] = (),
    summary: Optional[str] = None,
) -> int:
    """JSON when ``--json`` was given, otherwise the human-readable lines then the message."""
    if getattr(args, "json", False):
        return structured_response(command, message=message, payload=payload, summary=summary)
    for line in lines:
        print(line)
    if message:
        print(message)
    return 0


def fail(args, command: str, message: str, *, payload: Optional[Dict] = None) -> int:
    if getattr(args, "json", False):
        return structured_error(command, message, payload=payload)
    print(f"Error: {message}", file=sys.stderr)
    return 1


__all__ = ["iso_timestamp", "structured_response", "structured_error", "emit", "fail"]

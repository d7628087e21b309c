# Area: Shared
"""Error formatting for structured question-set error logs."""

from __future__ import annotations
from typing import List, Optional


def format_error_block(
    error_type: str,
    title: str,
    location: Optional[str],
    message: str,
    details: Optional[List[str]],
) -> str:
    """Format a structured error block for the terminal and log file."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        f" {title.upper()} — QUESTION SET REJECTED",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
    ]

    if location is not None:
        lines.append(f" Location:     {location}")

    lines.append("")
    lines.append(f" {message}")

    if details:
        lines.append("")
        lines.append(" ── DETAILS " + "─" * 52)
        for detail in details:
            lines.append(f" • {detail}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


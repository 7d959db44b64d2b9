"""
Centralized formatting utilities for the admin console.
"""
import json
from typing import Any


STAT_LABELS = {
    "collections": "Collections",
    "views": "Views",
    "objects": "Documents",
    "avgObjSize": "Avg. document size",
    "dataSize": "Data size",
    "storageSize": "Storage size",
    "indexes": "Indexes",
    "indexSize": "Index size",
    "totalSize": "Total size",
    "fsUsedSize": "Filesystem used",
    "fsTotalSize": "Filesystem total",
}

SIZE_STATS = {"avgObjSize", "dataSize", "storageSize", "indexSize", "totalSize", "fsUsedSize", "fsTotalSize"}


def format_number(value: float, decimals: int = 2) -> str:
    """Format numbers with K/M suffixes."""
    try:
        if value is None:
            return "-"
        if abs(value) >= 1_000_000:
            return f"{value/1_000_000:.1f}M"
        if abs(value) >= 1_000:
            return f"{value/1_000:.1f}k"
        if float(value).is_integer():
            return str(int(value))
        return f"{value:.{decimals}f}"
    except (TypeError, ValueError):
        return "-"


def format_bytes(value: float) -> str:
    """Format a byte count as B/KB/MB/GB/TB."""
    try:
        if value is None:
            return "-"
        size = float(value)
        for unit in ("B", "KB", "MB", "GB"):
            if abs(size) < 1024:
                return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
            size /= 1024
        return f"{size:.1f} TB"
    except (TypeError, ValueError):
        return "-"


def _unwrap_number(value: Any) -> Any:
    """Relaxed extended JSON keeps some numbers wrapped, e.g. {"$numberLong": "12"}."""
    if isinstance(value, dict) and len(value) == 1:
        inner = next(iter(value.values()))
        try:
            return float(inner)
        except (TypeError, ValueError):
            return value
    return value


def format_stat_value(key: str, value: Any) -> str:
    """Format one dbstats member for display."""
    value = _unwrap_number(value)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return str(value)
    if key in SIZE_STATS:
        return format_bytes(value)
    return format_number(value)


def stat_label(key: str) -> str:
    return STAT_LABELS.get(key, key)


def format_document(document: dict, fmt: str = "json") -> str:
    """Render a document as indented JSON or as a flat key/value listing."""
    if fmt == "array":
        return "\n".join(f"{key} => {json.dumps(value, default=str)}" for key, value in document.items())
    return json.dumps(document, indent=2, default=str)

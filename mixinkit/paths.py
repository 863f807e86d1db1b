"""Path helpers for mixin type names and import lines."""

from __future__ import annotations


def _is_numeric(segment: str) -> bool:
    return bool(segment) and all("0" <= char <= "9" for char in segment)


def sanitize_numeric_path_segments(path: str) -> str:
    """Prefix purely numeric path segments with "_" and normalise slashes."""
    segments = [
        f"_{segment}" if _is_numeric(segment) else segment
        for segment in path.split("/")
        if segment
    ]
    return "/" + "/".join(segments)


def import_line(relative_import_path: str) -> str:
    return f"import '.{relative_import_path}';"
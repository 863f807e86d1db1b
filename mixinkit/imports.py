"""Maintain import lines in the auto-import file."""

from __future__ import annotations

from pathlib import Path

from .paths import import_line


def add_import_statement(file_path, relative_import_path: str) -> bool:
    """Append the import line unless present; create the file if needed."""
    path = Path(file_path)
    line = import_line(relative_import_path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError:
        path.write_text(line, encoding="utf-8")
        return True
    if line in content:
        return False
    path.write_text(f"{content}\n{line}", encoding="utf-8")
    return True


def remove_import_statement(file_path, relative_import_path: str) -> bool:
    """Drop the import line and blank lines; return whether the line was there."""
    path = Path(file_path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError:
        return False
    line = import_line(relative_import_path)
    lines = [entry for entry in content.splitlines() if entry]
    kept = [entry for entry in lines if entry.strip() != line]
    path.write_text("\n".join(kept), encoding="utf-8")
    return len(kept) != len(lines)
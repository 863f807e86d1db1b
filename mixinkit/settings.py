"""Project settings for mixin generation."""

from __future__ import annotations

import configparser
from dataclasses import dataclass, replace
from pathlib import Path

SECTION = "/Script/PuerTSExpand.PuertsExpandSettings"

_KEYS = {
    "OutputPath": "output_path",
    "AutoImportFileName": "auto_import_file_name",
    "NodeCommand": "node_command",
}


@dataclass(frozen=True)
class Settings:
    """Where mixin files go and which file collects their imports."""

    output_path: str = "TypeScript"
    auto_import_file_name: str = "MainGame.ts"
    node_command: str = "/c npm run dev"


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def load_settings(path) -> Settings:
    """Read settings from an INI file; missing file or keys keep the defaults."""
    parser = configparser.ConfigParser(interpolation=None, strict=False)
    parser.optionxform = str
    parser.read(Path(path), encoding="utf-8")

    sections = [SECTION] if parser.has_section(SECTION) else parser.sections()
    values = {}
    for section in sections:
        for key, attribute in _KEYS.items():
            if parser.has_option(section, key):
                values[attribute] = _unquote(parser.get(section, key))
    return replace(Settings(), **values)
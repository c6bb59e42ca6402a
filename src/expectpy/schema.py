"""Generate JSON Schema and docs for the settings YAML format."""

from __future__ import annotations

import json
from pathlib import Path

from expectpy.config import ExpectConfig


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def generate_json_schema() -> dict:
    return ExpectConfig.model_json_schema()


def write_json_schema(path: Path) -> None:
    _ensure_parent(path)
    path.write_text(json.dumps(generate_json_schema(), indent=2) + "\n")


def generate_schema_doc() -> str:
    schema = generate_json_schema()
    inspect_props = schema.get("$defs", {}).get("InspectConfig", {}).get("properties", {})

    lines: list[str] = []
    lines.append("# expectpy settings")
    lines.append("")
    lines.append("This doc is generated from the Pydantic models.")
    lines.append("")
    lines.append("Point `EXPECTPY_CONFIG` at a YAML file to load it on first use.")
    lines.append("")
    lines.append("## `inspect`")
    lines.append("Controls how values are rendered in failure messages.")
    lines.append("")
    for key, prop in inspect_props.items():
        default = prop.get("default")
        description = prop.get("description", "")
        lines.append(f"- `{key}`: {prop.get('type', 'any')} (default {default}) - {description}")

    lines.append("")
    return "\n".join(lines)


def write_schema_doc(path: Path) -> None:
    _ensure_parent(path)
    path.write_text(generate_schema_doc())

"""
Structured Output Config — Options shared by the engine and the local fallback.

Configs are usually built in code, but can also be loaded from YAML:

    json_schema_file: schemas/invoice.json
    include_schema_in_prompt: false
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Union

import yaml
from pydantic import BaseModel, ConfigDict, Field


class StructuredOutputConfig(BaseModel):
    """Schema text plus prompt options for one structured-output call."""

    model_config = ConfigDict(frozen=True)

    json_schema: str = Field(..., description="JSON Schema text, passed through verbatim")
    include_schema_in_prompt: bool = Field(
        default=True,
        description="Embed the schema block in prompts built by prepare_prompt",
    )

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "StructuredOutputConfig":
        """Load a config from a YAML file."""
        return load_config(path)


def load_config(path: Union[str, Path]) -> StructuredOutputConfig:
    """
    Load a structured output config from YAML.

    The schema is given either inline (``json_schema``, as text or as a
    mapping) or by reference (``json_schema_file``, relative to the YAML file).

    Raises:
        FileNotFoundError: If the config or referenced schema file doesn't exist
        ValueError: If the config is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config must be a mapping: {path}")

    return parse_config(data, base_dir=path.parent)


def parse_config(data: dict, base_dir: Union[str, Path, None] = None) -> StructuredOutputConfig:
    """Parse config data from a dictionary."""
    inline = data.get("json_schema")
    schema_file = data.get("json_schema_file")

    if inline is not None and schema_file is not None:
        raise ValueError("Config sets both json_schema and json_schema_file")

    if schema_file is not None:
        schema_path = Path(base_dir or ".") / schema_file
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema file not found: {schema_path}")
        schema = schema_path.read_text()
    elif isinstance(inline, (dict, list)):
        schema = json.dumps(inline, indent=2)
    elif isinstance(inline, str):
        schema = inline
    else:
        raise ValueError("Config requires json_schema or json_schema_file")

    include = data.get("include_schema_in_prompt", True)
    if not isinstance(include, bool):
        raise ValueError(f"include_schema_in_prompt must be a boolean, got {include!r}")

    return StructuredOutputConfig(json_schema=schema, include_schema_in_prompt=include)

"""Packaged JSON Schemas for the bezel catalog and user configuration."""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any

from jsonschema import validators


@lru_cache(maxsize=None)
def load_validator(schema_name: str) -> Any:
    schema_text = resources.files(__name__).joinpath(schema_name).read_text(encoding="utf-8")
    schema = json.loads(schema_text)
    validator_cls = validators.validator_for(schema)
    validator_cls.check_schema(schema)
    return validator_cls(schema)

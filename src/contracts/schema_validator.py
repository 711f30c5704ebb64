"""JSON Schema validation for puzzle documents."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import jsonschema

from .errors import SchemaValidationError

_REPO_ROOT = Path(__file__).resolve().parents[2]
_CONTRACT_ROOT = _REPO_ROOT / "PuzzleContracts"
PUZZLE_SCHEMA = "puzzle.schema.json"


@lru_cache(maxsize=None)
def load_schema(schema_path: str) -> Dict[str, Any]:
    """Load a schema relative to the contracts root directory."""

    resolved = (_CONTRACT_ROOT / schema_path).resolve()
    try:
        return json.loads(resolved.read_text("utf-8"))
    except FileNotFoundError as exc:
        raise SchemaValidationError("schema-not-found", schema_path) from exc


def validate_document(document: Any, schema_path: str = PUZZLE_SCHEMA) -> None:
    """Validate ``document`` against the schema, raising on the first violation."""

    schema = load_schema(schema_path)
    validator_cls = jsonschema.validators.validator_for(schema)
    validator = validator_cls(schema)
    error = jsonschema.exceptions.best_match(validator.iter_errors(document))
    if error is not None:
        location = "$" + "".join(f"[{part!r}]" for part in error.absolute_path)
        raise SchemaValidationError("schema-violation", f"{location}: {error.message}")


__all__ = ["PUZZLE_SCHEMA", "load_schema", "validate_document"]

import json
from pathlib import Path
from typing import Any, Dict
from jsonschema import Draft202012Validator

DEFAULT_SCHEMAS_DIR = Path(__file__).resolve().parents[1] / "config" / "schemas"


class SchemaRegistry:
    def __init__(self, schemas_dir: Path = DEFAULT_SCHEMAS_DIR):
        reg = json.loads((schemas_dir / "registry.json").read_text(encoding="utf-8"))
        self._map = {s["schema_id"]: (schemas_dir / s["path"]) for s in reg["schemas"]}
        self._cache: Dict[str, Draft202012Validator] = {}

    def load_schema(self, schema_id: str) -> Dict[str, Any]:
        return json.loads(self._map[schema_id].read_text(encoding="utf-8"))

    def validator(self, schema_id: str) -> Draft202012Validator:
        if schema_id not in self._cache:
            self._cache[schema_id] = Draft202012Validator(self.load_schema(schema_id))
        return self._cache[schema_id]


def validate_payload(payload: Dict[str, Any], schema_id: str, registry: SchemaRegistry) -> None:
    if payload.get("schema_id") != schema_id:
        raise ValueError("schema_id mismatch")
    registry.validator(schema_id).validate(payload)

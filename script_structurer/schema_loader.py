from functools import lru_cache
from pathlib import Path
import json

from jsonschema import Draft7Validator

_CONTRACTS_DIR = Path(__file__).resolve().parent / "contracts"


def load_schema(name: str):
    schema_path = _CONTRACTS_DIR / name
    if not schema_path.exists():
        raise FileNotFoundError(f"Missing canonical schema: {schema_path}")
    return json.loads(schema_path.read_text(encoding="utf-8"))


@lru_cache(maxsize=None)
def load_validator(name: str) -> Draft7Validator:
    return Draft7Validator(load_schema(name))

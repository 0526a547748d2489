#!/usr/bin/env python3
"""Check fleet YAML files against schema.yaml before loading them."""
import json
import sys
from pathlib import Path

import yaml
from jsonschema import Draft7Validator

from assetwatch.config import settings
from assetwatch.loader import read_fleet_json

SCHEMA_PATH = Path(__file__).parent / "schema.yaml"


def load_schema() -> dict:
    """Load the fleet file JSON schema."""
    with open(SCHEMA_PATH) as f:
        return yaml.safe_load(f)


def _format_error(error) -> list[str]:
    lines = [f"Schema validation error: {error.message}"]
    if error.path:
        lines.append(f"  at path: {'.'.join(str(p) for p in error.path)}")
    return lines


def validate_fleet_file(filepath: Path, schema: dict) -> list[str]:
    """
    Validate one fleet file. Returns a list of error lines, empty when valid.

    Every schema violation is reported, in document order, not just the first.
    """
    try:
        data = json.loads(read_fleet_json(filepath))
    except yaml.YAMLError as e:
        return [f"YAML parse error: {e}"]
    except OSError as e:
        return [f"Error: {e}"]

    errors = []
    validator = Draft7Validator(schema)
    for error in sorted(validator.iter_errors(data), key=lambda e: list(map(str, e.path))):
        errors.extend(_format_error(error))
    return errors


def main(argv=None):
    """Validate the given fleet files (default: the FLEET_FILE setting)."""
    schema = load_schema()
    paths = [Path(p) for p in (argv if argv is not None else sys.argv[1:])]
    if not paths:
        paths = [Path(settings.FLEET_FILE)]

    failed = 0
    for filepath in paths:
        errors = validate_fleet_file(filepath, schema)
        if errors:
            failed += 1
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
        else:
            print(f"OK: {filepath.name}")

    if len(paths) > 1:
        print(f"\n{len(paths) - failed}/{len(paths)} files valid")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())

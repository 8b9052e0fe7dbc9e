"""Schema artifacts — versioned JSON Schema documents for PaletteJSON.

Each version lives in its own directory (`v0.1/palettejson.schema.json`) so
other tools can load the declarative rules without this package's code.
"""

import json
from pathlib import Path

import structlog

from palettejson.errors import SchemaNotFoundError

SCHEMA_DIR = Path(__file__).parent
SCHEMA_FILENAME = "palettejson.schema.json"

# Cache loaded schemas to avoid re-reading from disk
_schema_cache: dict[str, dict] = {}

logger = structlog.get_logger()


def available_versions() -> list[str]:
    """List shipped schema versions, e.g. ['0.1']."""
    return sorted(
        path.parent.name[1:]
        for path in SCHEMA_DIR.glob(f"v*/{SCHEMA_FILENAME}")
    )


def schema_path(version: str) -> Path:
    """Filesystem path of a schema version's artifact."""
    path = SCHEMA_DIR / f"v{version}" / SCHEMA_FILENAME
    if not path.is_file():
        raise SchemaNotFoundError(version, available_versions())
    return path


def load_schema(version: str = "0.1") -> dict:
    """Load and cache the JSON Schema for a version.

    Raises:
        SchemaNotFoundError: if no artifact exists for the version
    """
    if version in _schema_cache:
        return _schema_cache[version]

    path = schema_path(version)
    schema = json.loads(path.read_text(encoding="utf-8"))
    _schema_cache[version] = schema
    logger.debug("schema_loaded", version=version, path=str(path))
    return schema

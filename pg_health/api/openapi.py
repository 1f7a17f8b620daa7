# pg_health/api/openapi.py
"""Loader for the hand-maintained OpenAPI document."""

import json
from pathlib import Path
from typing import Any, Dict

OPENAPI_DOCUMENT = Path(__file__).resolve().parent.parent / "openapi.json"


def load_openapi_document(version: str) -> Dict[str, Any]:
    """Load the OpenAPI document shipped with the package.

    Args:
        version: Application version to stamp into ``info.version``.

    Returns:
        The OpenAPI document as a dictionary.
    """
    with OPENAPI_DOCUMENT.open(encoding="utf-8") as f:
        document = json.load(f)
    document["info"]["version"] = version
    return document

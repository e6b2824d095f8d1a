"""JSON output — deterministic rendering of a SeparationResult."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from separation.model import SeparationResult


def render_json(result: SeparationResult) -> str:
    """Return byte-deterministic JSON for *result*."""
    data = result.model_dump(mode="json")
    return json.dumps(data, sort_keys=True, indent=2)

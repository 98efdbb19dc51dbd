"""Quickfilter State Codec - Saved-State Serialization.

The saved state is a JSON object keyed by facet name.  Categorical
facets store ``{value: selected}``; free-text facets store the raw
query string.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


def encode_state(state: Dict[str, Any], indent: Optional[int] = None) -> str:
    """Serialize per-facet state.

    Args:
        state: Mapping of facet name to facet state
        indent: JSON indent, or None for compact output

    Returns:
        JSON text
    """
    return json.dumps(state, indent=indent, ensure_ascii=False, sort_keys=indent is not None)


def decode_state(text: Optional[str]) -> Dict[str, Any]:
    """Parse saved state, tolerating anything malformed.

    Args:
        text: Saved JSON text, or None

    Returns:
        Mapping of facet name to facet state; empty if the text is
        missing, unparseable, or not a JSON object
    """
    if not text:
        return {}
    try:
        state = json.loads(text)
    except (ValueError, RecursionError) as e:
        logger.debug(f"Discarding unparseable saved state: {e}")
        return {}
    if not isinstance(state, dict):
        logger.debug(f"Discarding saved state of type {type(state).__name__}")
        return {}
    return state


__all__ = ["encode_state", "decode_state"]

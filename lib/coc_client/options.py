from __future__ import annotations

import copy
from typing import Any, Mapping


def merge_options(*sources: Mapping[str, Any] | None) -> dict[str, Any]:
    """Deep-merge request option mappings; later sources win.

    Nested mappings are merged key by key, any other value replaces the
    earlier one. ``None`` values (and ``None`` sources) are skipped. Inputs
    are never mutated.
    """
    merged: dict[str, Any] = {}
    for source in sources:
        if source:
            _merge_into(merged, source)
    return merged


def _merge_into(target: dict[str, Any], source: Mapping[str, Any]) -> None:
    for key, value in source.items():
        if value is None:
            continue
        if isinstance(value, Mapping):
            current = target.get(key)
            if not isinstance(current, dict):
                current = {}
                target[key] = current
            _merge_into(current, value)
        else:
            target[key] = copy.deepcopy(value)

"""
Recursive merge of decoded configuration trees.

Values are either scalars, lists or string-keyed mappings. When both sides
hold a mapping for the same key the two are merged key by key; in every
other case the incoming value replaces the existing one, falsy values and
lists included.
"""

import copy
from typing import Any, Dict, Mapping, MutableMapping

from dirconf.core.exceptions import MergeError


def deep_merge(dst: MutableMapping[str, Any], src: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Merge ``src`` into ``dst`` in place and return ``dst``.
    
    Raises:
        MergeError: If either operand is not a mapping
    """
    if not isinstance(dst, MutableMapping):
        raise MergeError(reason=f"destination must be a mapping, got {type(dst).__name__}")
    if not isinstance(src, Mapping):
        raise MergeError(reason=f"source must be a mapping, got {type(src).__name__}")

    for key, value in src.items():
        current = dst.get(key)
        if isinstance(current, MutableMapping) and isinstance(value, Mapping):
            deep_merge(current, value)
        else:
            # Copy so the accumulator never aliases a decoded file's tree
            dst[key] = copy.deepcopy(value)
    return dst

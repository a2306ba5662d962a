"""
Decoding of individual configuration files.
"""

import json
import os
from typing import Any, Dict, MutableMapping, Optional

import yaml

from dirconf.core.exceptions import DecodeError, UnsupportedFileTypeError


def _decode_json(raw: bytes) -> Any:
    return json.loads(raw)


def _decode_yaml(raw: bytes) -> Any:
    # An empty document leaves the destination mapping empty
    data = yaml.safe_load(raw)
    return {} if data is None else data


def _extension(path: str) -> str:
    """Text after the last dot of the file name, so ".yaml" counts as YAML."""
    name = os.path.basename(path)
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1]


DECODERS = {
    "json": _decode_json,
    "yml": _decode_yaml,
    "yaml": _decode_yaml,
}


def read_config_file(path, dest: Optional[MutableMapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Decode a configuration file according to its extension.
    
    Args:
        path: File to read; ``.json``, ``.yml`` and ``.yaml`` are recognised
        dest: Optional mapping updated in place with the decoded content
        
    Returns:
        The decoded mapping, or ``dest`` when one was given
        
    Raises:
        UnsupportedFileTypeError: If the extension has no decoder
        DecodeError: If the file cannot be read, parsed, or is not a mapping
    """
    path = os.fspath(path)
    ext = _extension(path)
    decoder = DECODERS.get(ext)
    if decoder is None:
        raise UnsupportedFileTypeError(path)

    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise DecodeError(path, str(e)) from e

    try:
        data = decoder(raw)
    except (ValueError, yaml.YAMLError) as e:
        raise DecodeError(path, str(e)) from e

    if not isinstance(data, dict):
        raise DecodeError(path, f"expected a mapping at the top level, got {type(data).__name__}")

    if dest is None:
        return data
    dest.update(data)
    return dest

# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

import base64
import json
from collections.abc import Mapping
from typing import Any

from oidc_sweden.exceptions import ParseError


def load_json_object(value: Mapping[str, Any] | str | bytes) -> Mapping[str, Any]:
    """
    Accepts either an already decoded JSON object or its serialized form.
    Raises ParseError if the value is not (or does not decode to) a JSON object.
    """
    if isinstance(value, (str, bytes)):
        try:
            value = json.loads(value)
        except ValueError as e:
            raise ParseError("value is not valid JSON") from e
    if not isinstance(value, Mapping):
        raise ParseError("expected a JSON object")
    return value


def decode_base64(data: str) -> bytes:
    """
    Decodes standard (not URL-safe) Base64. Missing padding is tolerated.
    Throws ValueError if data is not a string of the Base64 alphabet.
    """
    if not isinstance(data, str):
        raise ValueError(f"Can't Base64-decode a {type(data).__name__}.")
    if "=" not in data:
        data = add_padding(data)
    return base64.b64decode(data, validate=True)


def add_padding(base64_encoded: str) -> str:
    """Add the padding (=) an unpadded Base64 string lacks."""
    return base64_encoded + "=" * (-len(base64_encoded) % 4)


def encode_base64(data: bytes) -> str:
    """Encodes bytes as a standard Base64 string."""
    return base64.b64encode(data).decode("ascii")

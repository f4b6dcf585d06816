# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

"""
The Signature Request parameter (https://id.oidc.se/param/signRequest).
"""

from collections.abc import Mapping
from typing import Any

from authlib.common.encoding import to_bytes
from pydantic import BaseModel, ConfigDict, field_validator

from oidc_sweden.constants import SIGN_REQUEST_PARAM_NAME
from oidc_sweden.exceptions import ParameterValidationError, ParseError
from oidc_sweden.user_message import UserMessage
from oidc_sweden.utils.logger import logger
from oidc_sweden.utils.parsing import decode_base64, encode_base64, load_json_object

__all__ = ["SignRequest", "PARAMETER_NAME"]

PARAMETER_NAME = SIGN_REQUEST_PARAM_NAME


class SignRequest(BaseModel):
    """
    Input for a user signature operation.

    Attributes:
        tbs_data (str): The data to be signed, as a standard Base64 string.
        sign_message (UserMessage): The message displayed to the user during the signature operation.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    tbs_data: str
    sign_message: UserMessage

    @field_validator("tbs_data")
    @classmethod
    def validate_base64(cls, v: str) -> str:
        try:
            decode_base64(v)
        except ValueError as e:
            raise ValueError("tbs_data does not contain a valid Base64 string") from e
        return v

    @classmethod
    def from_bytes(cls, tbs_data_contents: bytes | str, sign_message: UserMessage) -> "SignRequest":
        """
        Creates a sign request from the raw data to be signed.

        Args:
            tbs_data_contents: The raw data. Strings are UTF-8 encoded.
            sign_message: The message to display during the signature operation.
        """
        if tbs_data_contents is None:
            raise ParameterValidationError("tbs_data_contents must not be None")
        return cls(tbs_data=encode_base64(to_bytes(tbs_data_contents)), sign_message=sign_message)

    @property
    def tbs_data_contents(self) -> bytes:
        """The decoded data to be signed."""
        return decode_base64(self.tbs_data)

    def to_json_object(self) -> dict[str, Any]:
        """Returns the JSON object for the sign request."""
        return self.model_dump()

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def parse(cls, json_object: Mapping[str, Any] | str) -> "SignRequest":
        """
        Parses a JSON object (or its string form) into a SignRequest.

        Raises:
            ParseError: If the object does not follow the sign request format.
        """
        json_object = load_json_object(json_object)

        tbs_data = json_object.get("tbs_data")
        if tbs_data is None:
            raise ParseError("missing required field tbs_data")
        try:
            decode_base64(tbs_data)
        except ValueError as e:
            raise ParseError("tbs_data does not contain a valid Base64 string") from e

        sign_message = json_object.get("sign_message")
        if sign_message is None:
            raise ParseError("missing required field sign_message")
        if not isinstance(sign_message, Mapping):
            raise ParseError("invalid type for sign_message")

        sign_request = cls(tbs_data=tbs_data, sign_message=UserMessage.parse(sign_message))
        logger.debug("Parsed sign request")
        return sign_request

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, SignRequest):
            return NotImplemented
        return self.tbs_data_contents == other.tbs_data_contents and self.sign_message == other.sign_message

    def __hash__(self) -> int:
        return hash((self.tbs_data_contents, self.sign_message))

    def __str__(self) -> str:
        return f"tbs_data={self.tbs_data}, sign_message=[{self.sign_message}]"

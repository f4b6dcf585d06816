# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

import base64
import json
from typing import Any

import pytest
from pydantic import ValidationError

from oidc_sweden.constants import TEXT_MIME_TYPE
from oidc_sweden.exceptions import ParameterValidationError, ParseError
from oidc_sweden.sign_request import PARAMETER_NAME, SignRequest
from oidc_sweden.user_message import Message, UserMessage

TBS = "This is the text to sign"
TBS_BASE64 = base64.b64encode(TBS.encode()).decode()


def test_parameter_name() -> None:
    assert PARAMETER_NAME == "https://id.oidc.se/param/signRequest"


def test_create_and_get(sign_message: UserMessage) -> None:
    sign_request = SignRequest(tbs_data=TBS_BASE64, sign_message=sign_message)

    assert sign_request.tbs_data == TBS_BASE64
    assert sign_request.tbs_data_contents == TBS.encode()
    assert sign_request.sign_message == sign_message
    assert str(sign_request) == f"tbs_data={TBS_BASE64}, sign_message=[{sign_message}]"


def test_from_bytes(sign_message: UserMessage) -> None:
    sign_request = SignRequest.from_bytes(TBS.encode(), sign_message)
    assert sign_request.tbs_data == TBS_BASE64
    assert sign_request == SignRequest(tbs_data=TBS_BASE64, sign_message=sign_message)


def test_from_str_is_utf8_encoded(sign_message: UserMessage) -> None:
    sign_request = SignRequest.from_bytes("Godkänn", sign_message)
    assert sign_request.tbs_data_contents == "Godkänn".encode("utf-8")


def test_missing_fields(sign_message: UserMessage) -> None:
    with pytest.raises(ValidationError):
        SignRequest(tbs_data=None, sign_message=sign_message)  # type: ignore[arg-type]

    with pytest.raises(ValidationError):
        SignRequest(tbs_data=TBS_BASE64, sign_message=None)  # type: ignore[arg-type]

    with pytest.raises(ValidationError):
        SignRequest(tbs_data=TBS_BASE64)  # type: ignore[call-arg]

    with pytest.raises(ParameterValidationError):
        SignRequest.from_bytes(None, sign_message)  # type: ignore[arg-type]

    with pytest.raises(ValidationError):
        SignRequest.from_bytes(b"data", None)  # type: ignore[arg-type]


def test_invalid_base64(sign_message: UserMessage) -> None:
    with pytest.raises(ValidationError, match="tbs_data does not contain a valid Base64 string"):
        SignRequest(tbs_data="not-base64!!", sign_message=sign_message)


def test_unpadded_base64(sign_message: UserMessage) -> None:
    sign_request = SignRequest.parse({"tbs_data": "YWI", "sign_message": sign_message.to_json_object()})
    assert sign_request.tbs_data_contents == b"ab"
    assert sign_request == SignRequest.from_bytes(b"ab", sign_message)
    assert SignRequest.from_bytes(b"ab", sign_message).tbs_data == "YWI="


@pytest.mark.parametrize("bad_tbs_data", ["Y", "YWJjZ", "YW=I"])
def test_invalid_base64_length(bad_tbs_data: str) -> None:
    with pytest.raises(ParseError, match="tbs_data does not contain a valid Base64 string"):
        SignRequest.parse({"tbs_data": bad_tbs_data, "sign_message": {"message": "Sign"}})


def test_is_immutable(sign_message: UserMessage) -> None:
    sign_request = SignRequest.from_bytes(b"data", sign_message)
    with pytest.raises(ValidationError):
        sign_request.tbs_data = "ZGF0YTI="  # type: ignore[misc]


def test_to_json_object(sign_message: UserMessage) -> None:
    sign_request = SignRequest.from_bytes(TBS.encode(), sign_message)
    assert sign_request.to_json_object() == {
        "tbs_data": TBS_BASE64,
        "sign_message": {
            "message#sv": "Godkänn underskrift",
            "message#en": "Approve signature",
            "mime_type": TEXT_MIME_TYPE,
        },
    }
    assert json.loads(sign_request.to_json()) == sign_request.to_json_object()


def test_json_and_parse(sign_message: UserMessage) -> None:
    sign_request = SignRequest.from_bytes(TBS.encode(), sign_message)

    parsed = SignRequest.parse(sign_request.to_json_object())
    assert parsed == sign_request
    assert hash(parsed) == hash(sign_request)

    assert SignRequest.parse(sign_request.to_json()) == sign_request


def test_parse_errors(sign_message: UserMessage) -> None:
    json_object: dict[str, Any] = {"hello": "foo"}
    with pytest.raises(ParseError, match="missing required field tbs_data"):
        SignRequest.parse(json_object)

    json_object["tbs_data"] = "This is not base64"
    with pytest.raises(ParseError, match="tbs_data does not contain a valid Base64 string"):
        SignRequest.parse(json_object)

    json_object["tbs_data"] = base64.b64encode(b"TBS").decode()
    with pytest.raises(ParseError, match="missing required field sign_message"):
        SignRequest.parse(json_object)

    json_object["sign_message"] = dict(sign_message.to_json_object())
    SignRequest.parse(json_object)

    json_object["sign_message"] = "text"
    with pytest.raises(ParseError, match="invalid type for sign_message"):
        SignRequest.parse(json_object)


def test_parse_base64_checked_before_sign_message() -> None:
    with pytest.raises(ParseError, match="tbs_data does not contain a valid Base64 string"):
        SignRequest.parse({"tbs_data": "not-base64!!", "sign_message": "invalid"})


def test_parse_non_string_tbs_data() -> None:
    with pytest.raises(ParseError, match="tbs_data does not contain a valid Base64 string"):
        SignRequest.parse({"tbs_data": 42, "sign_message": {"message": "Hello"}})


def test_parse_propagates_sign_message_errors() -> None:
    with pytest.raises(ParseError, match=r"missing message field\(s\)"):
        SignRequest.parse({"tbs_data": "VEJT", "sign_message": {}})

    with pytest.raises(ParseError, match="field message expected to be a string"):
        SignRequest.parse({"tbs_data": "VEJT", "sign_message": {"message": 1}})


def test_equality() -> None:
    um_en = UserMessage(messages=[Message("English", "en")], mime_type=TEXT_MIME_TYPE)
    um_sv = UserMessage(messages=[Message("Swedish", "sv")], mime_type=TEXT_MIME_TYPE)
    sr1 = SignRequest.from_bytes(b"data", um_en)
    sr2 = SignRequest.from_bytes(b"data2", um_en)
    sr3 = SignRequest.from_bytes(b"data", um_sv)

    assert sr1 == sr1
    um_en_copy = UserMessage(messages=[Message("English", "en")], mime_type=TEXT_MIME_TYPE)
    assert sr1 == SignRequest.from_bytes(b"data", um_en_copy)
    assert sr1 != sr2
    assert sr1 != sr3
    assert sr1 != "other-type"

# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

"""
Rendering and extraction of the OIDC Sweden authentication request parameters.

The rendered mapping can be passed as extra parameters to an OAuth 2.0 client,
e.g. ``client.create_authorization_url(url, **build_request_parameters(...))``
with Authlib.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from oidc_sweden.constants import (
    ORIGINAL_CLIENT_ID_PARAM_NAME,
    ORIGINAL_CLIENT_TOKEN_PARAM_NAME,
    REQUESTED_PROVIDER_PARAM_NAME,
    SIGN_REQUEST_PARAM_NAME,
    USER_MESSAGE_PARAM_NAME,
)
from oidc_sweden.exceptions import ParseError
from oidc_sweden.sign_request import SignRequest
from oidc_sweden.user_message import UserMessage
from oidc_sweden.utils.logger import logger


class RequestParameters(BaseModel):
    """
    The OIDC Sweden parameters found in an authentication request.

    Attributes:
        user_message (UserMessage | None): The user message parameter.
        sign_request (SignRequest | None): The signature request parameter.
        authn_provider (str | None): The requested authentication provider.
        original_client_id (str | None): Client id of the client behind a proxy.
        original_client_token (str | None): Token describing the client behind a proxy.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    user_message: UserMessage | None = None
    sign_request: SignRequest | None = None
    authn_provider: str | None = None
    original_client_id: str | None = None
    original_client_token: str | None = None


def build_request_parameters(
    user_message: UserMessage | None = None,
    sign_request: SignRequest | None = None,
    authn_provider: str | None = None,
    original_client_id: str | None = None,
    original_client_token: str | None = None,
) -> dict[str, str]:
    """
    Renders the given values as authentication request parameters.
    Structured values are JSON encoded; None values are left out.
    """
    params: dict[str, str] = {}
    if user_message is not None:
        params[USER_MESSAGE_PARAM_NAME] = user_message.to_json()
    if sign_request is not None:
        params[SIGN_REQUEST_PARAM_NAME] = sign_request.to_json()
    if authn_provider is not None:
        params[REQUESTED_PROVIDER_PARAM_NAME] = authn_provider
    if original_client_id is not None:
        params[ORIGINAL_CLIENT_ID_PARAM_NAME] = original_client_id
    if original_client_token is not None:
        params[ORIGINAL_CLIENT_TOKEN_PARAM_NAME] = original_client_token

    logger.debug(f"Built {len(params)} OIDC Sweden request parameter(s)")
    return params


def _get_string(params: Mapping[str, Any], name: str) -> str | None:
    value = params.get(name)
    if value is not None and not isinstance(value, str):
        raise ParseError(f"parameter {name} expected to be a string")
    return value


def parse_request_parameters(params: Mapping[str, Any]) -> RequestParameters:
    """
    Extracts the OIDC Sweden parameters from a received request parameter mapping.

    Structured parameters may be given as JSON strings (as received in a query
    string or form) or as already decoded objects (as found in a request object).

    Raises:
        ParseError: If a present parameter can not be parsed.
    """
    user_message = params.get(USER_MESSAGE_PARAM_NAME)
    sign_request = params.get(SIGN_REQUEST_PARAM_NAME)

    return RequestParameters(
        user_message=UserMessage.parse(user_message) if user_message is not None else None,
        sign_request=SignRequest.parse(sign_request) if sign_request is not None else None,
        authn_provider=_get_string(params, REQUESTED_PROVIDER_PARAM_NAME),
        original_client_id=_get_string(params, ORIGINAL_CLIENT_ID_PARAM_NAME),
        original_client_token=_get_string(params, ORIGINAL_CLIENT_TOKEN_PARAM_NAME),
    )

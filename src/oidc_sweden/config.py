# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

"""
OpenID Provider settings for the OIDC Sweden extensions.
"""

from typing import Any

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from oidc_sweden.constants import (
    MARKDOWN_MIME_TYPE,
    ORIGINAL_CLIENT_ID_SUPPORTED_PARAM_NAME,
    ORIGINAL_CLIENT_TOKEN_SUPPORTED_PARAM_NAME,
    REQUESTED_PROVIDER_SUPPORTED_PARAM_NAME,
    TEXT_MIME_TYPE,
    USER_MESSAGE_SUPPORTED_MIMETYPES_PARAM_NAME,
    USER_MESSAGE_SUPPORTED_PARAM_NAME,
)


class OidcSwedenProviderSettings(BaseSettings):
    """
    Which OIDC Sweden request parameters an OpenID Provider supports.

    Attributes:
        user_message_supported (bool): Whether the userMessage parameter is supported.
        user_message_supported_mime_types (list[str]): The user message MIME types that are supported.
        authn_provider_supported (bool): Whether the authnProvider parameter is supported.
        original_client_id_supported (bool): Whether the originalClientId parameter is supported.
        original_client_token_supported (bool): Whether the originalClientToken parameter is supported.
    """

    model_config = SettingsConfigDict(
        env_prefix="OIDC_SWEDEN_",
        case_sensitive=False,
    )

    user_message_supported: bool = True
    user_message_supported_mime_types: list[str] = Field(
        default_factory=lambda: [TEXT_MIME_TYPE, MARKDOWN_MIME_TYPE],
        description="JSON list in the environment, e.g. '[\"text/plain\"]'.",
    )
    authn_provider_supported: bool = False
    original_client_id_supported: bool = False
    original_client_token_supported: bool = False

    @model_validator(mode="after")
    def check_mime_types(self) -> "OidcSwedenProviderSettings":
        """
        Requires at least one MIME type when user messages are supported.
        """
        if self.user_message_supported and not self.user_message_supported_mime_types:
            raise ValueError("At least one user message MIME type must be given when user messages are supported")
        if any(not m.strip() for m in self.user_message_supported_mime_types):
            raise ValueError("User message MIME types must not be blank")
        return self

    def discovery_metadata(self) -> dict[str, Any]:
        """
        Returns the OIDC Sweden entries of the provider's discovery document.
        """
        metadata: dict[str, Any] = {USER_MESSAGE_SUPPORTED_PARAM_NAME: self.user_message_supported}
        if self.user_message_supported:
            metadata[USER_MESSAGE_SUPPORTED_MIMETYPES_PARAM_NAME] = list(self.user_message_supported_mime_types)
        metadata[REQUESTED_PROVIDER_SUPPORTED_PARAM_NAME] = self.authn_provider_supported
        metadata[ORIGINAL_CLIENT_ID_SUPPORTED_PARAM_NAME] = self.original_client_id_supported
        metadata[ORIGINAL_CLIENT_TOKEN_SUPPORTED_PARAM_NAME] = self.original_client_token_supported
        return metadata

# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

"""
OIDC Sweden extensions: user message and sign request parameters, claim and scope definitions.
"""

__version__ = "0.9.1"

from .config import OidcSwedenProviderSettings
from .exceptions import (
    DuplicateDefaultError,
    DuplicateLanguageError,
    InvalidLanguageTagError,
    OidcSwedenError,
    ParameterValidationError,
    ParseError,
)
from .language import language_tags_match, parse_language_tag
from .parameters import RequestParameters, build_request_parameters, parse_request_parameters
from .scopes import Requirement, ScopeValue
from .sign_request import SignRequest
from .user_message import Message, UserMessage

__all__ = [
    "DuplicateDefaultError",
    "DuplicateLanguageError",
    "InvalidLanguageTagError",
    "Message",
    "OidcSwedenError",
    "OidcSwedenProviderSettings",
    "ParameterValidationError",
    "ParseError",
    "RequestParameters",
    "Requirement",
    "ScopeValue",
    "SignRequest",
    "UserMessage",
    "build_request_parameters",
    "language_tags_match",
    "parse_language_tag",
    "parse_request_parameters",
]

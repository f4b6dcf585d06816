# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

"""
Custom exceptions for the oidc-sweden package.
"""


class OidcSwedenError(Exception):
    """Base exception for all oidc-sweden errors."""


class ParameterValidationError(OidcSwedenError, ValueError):
    """
    Raised when a value object is built from invalid input (bad language tag, duplicate message, missing field).
    Subclasses ValueError so that pydantic validators surface it as a ValidationError.
    """


class InvalidLanguageTagError(ParameterValidationError):
    """Raised when a string is not a well-formed, registered language tag."""


class DuplicateDefaultError(ParameterValidationError):
    """Raised when a second message without a language tag is added to a user message."""


class DuplicateLanguageError(ParameterValidationError):
    """Raised when a message whose language matches an already stored message is added."""


class ParseError(OidcSwedenError):
    """
    Raised when a received parameter value does not follow the wire format.
    The message names the offending field; the root cause, if any, is chained.
    """

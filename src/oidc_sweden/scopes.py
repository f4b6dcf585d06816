# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

"""
OpenID Connect scope values and the scopes defined by the Attribute Specification
for the Swedish OpenID Connect Profile.
"""

from collections.abc import Iterable
from enum import StrEnum
from typing import Any

from authlib.oauth2.rfc6749.util import list_to_scope, scope_to_list
from pydantic import BaseModel, ConfigDict, field_validator

from oidc_sweden import constants


class Requirement(StrEnum):
    REQUIRED = "required"
    OPTIONAL = "optional"


class ScopeValue(BaseModel):
    """
    A scope value and the names of the claims it gives access to.

    Attributes:
        value (str): The scope value as it appears in the ``scope`` parameter.
        requirement (Requirement): Whether the scope must be present in a request.
        claims (tuple[str, ...] | None): The associated claim names, None if not applicable.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    value: str
    requirement: Requirement = Requirement.OPTIONAL
    claims: tuple[str, ...] | None = None

    def __init__(
        self,
        value: str,
        claims: Iterable[str] | None = None,
        requirement: Requirement = Requirement.OPTIONAL,
        **data: Any,
    ) -> None:
        super().__init__(value=value, claims=claims, requirement=requirement, **data)

    @field_validator("value")
    @classmethod
    def check_value(cls, v: str) -> str:
        # Scope tokens are space-delimited on the wire
        if not v or any(c.isspace() for c in v):
            raise ValueError(f"Invalid scope value '{v}'")
        return v

    @field_validator("claims", mode="before")
    @classmethod
    def unique_claims(cls, v: Any) -> tuple[str, ...] | None:
        if v is None:
            return None
        return tuple(dict.fromkeys(v))

    def __str__(self) -> str:
        return self.value


# Standard scopes from OpenID Connect Core, section 5.4

OPENID = ScopeValue("openid", ["sub"], Requirement.REQUIRED)

PROFILE = ScopeValue(
    "profile",
    [
        "name",
        "family_name",
        "given_name",
        "middle_name",
        "nickname",
        "preferred_username",
        "profile",
        "picture",
        "website",
        "gender",
        "birthdate",
        "zoneinfo",
        "locale",
        "updated_at",
    ],
)

EMAIL = ScopeValue("email", ["email", "email_verified"])

ADDRESS = ScopeValue("address", ["address"])

PHONE = ScopeValue("phone", ["phone_number", "phone_number_verified"])

# Requests a refresh token, no claims
OFFLINE_ACCESS = ScopeValue("offline_access")

# OIDC Sweden scopes

# Basic natural person information without the civic registration number
NATURAL_PERSON_NAME_INFORMATION = ScopeValue(
    constants.OIDC_SWEDEN_SCOPE_PREFIX + "naturalPersonName",
    ["family_name", "given_name", "name"],
)

# naturalPersonName plus personal identity number or coordination number
NATURAL_PERSON_PERSONAL_NUMBER = ScopeValue(
    constants.OIDC_SWEDEN_SCOPE_PREFIX + "naturalPersonNumber",
    [
        constants.PERSONAL_IDENTITY_NUMBER_CLAIM_NAME,
        constants.COORDINATION_NUMBER_CLAIM_NAME,
        "family_name",
        "given_name",
        "name",
        "birthdate",
    ],
)

NATURAL_PERSON_ORGANIZATIONAL_IDENTITY = ScopeValue(
    constants.OIDC_SWEDEN_SCOPE_PREFIX + "naturalPersonOrgId",
    [
        "name",
        constants.ORGANIZATIONAL_AFFILIATION_CLAIM_NAME,
        constants.ORGANIZATION_NAME_CLAIM_NAME,
        constants.ORGANIZATION_NUMBER_CLAIM_NAME,
    ],
)

# Information from the authentication process and the credentials used; only auth_time is mandatory
AUTHENTICATION_INFORMATION = ScopeValue(
    constants.OIDC_SWEDEN_SCOPE_PREFIX + "authnInfo",
    [
        "auth_time",
        "txn",
        constants.USER_CERTIFICATE_CLAIM_NAME,
        constants.CREDENTIALS_VALID_FROM_CLAIM_NAME,
        constants.CREDENTIALS_VALID_TO_CLAIM_NAME,
        constants.DEVICE_IP_CLAIM_NAME,
    ],
)

STANDARD_SCOPES: tuple[ScopeValue, ...] = (OPENID, PROFILE, EMAIL, ADDRESS, PHONE, OFFLINE_ACCESS)

OIDC_SWEDEN_SCOPES: tuple[ScopeValue, ...] = (
    NATURAL_PERSON_NAME_INFORMATION,
    NATURAL_PERSON_PERSONAL_NUMBER,
    NATURAL_PERSON_ORGANIZATIONAL_IDENTITY,
    AUTHENTICATION_INFORMATION,
)

_KNOWN_SCOPES = {scope.value: scope for scope in STANDARD_SCOPES + OIDC_SWEDEN_SCOPES}


def find_scope(value: str) -> ScopeValue | None:
    """Looks up a known scope by its value."""
    return _KNOWN_SCOPES.get(value)


def scopes_to_string(scopes: Iterable[ScopeValue | str]) -> str:
    """Renders scope values as a space-delimited ``scope`` parameter value."""
    return list_to_scope([str(scope) for scope in scopes])


def scopes_from_string(scope: str | None) -> list[ScopeValue]:
    """
    Splits a ``scope`` parameter value into scope values.
    Known scopes resolve to their catalog entry, others get no associated claims.
    """
    values = scope_to_list(scope) or []
    return [find_scope(value) or ScopeValue(value) for value in values]


def claims_for_scopes(scopes: Iterable[ScopeValue]) -> list[str]:
    """Returns the claim names granted by the given scopes, in order and without duplicates."""
    claims: dict[str, None] = {}
    for scope in scopes:
        for claim in scope.claims or ():
            claims[claim] = None
    return list(claims)

# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

"""
Request parameter, discovery and claim names defined by the OIDC Sweden specifications.
"""

# Prefixes
OIDC_SWEDEN_PARAM_PREFIX = "https://id.oidc.se/param/"
OIDC_SWEDEN_DISCO_PREFIX = "https://id.oidc.se/disco/"
OIDC_SWEDEN_CLAIMS_PREFIX = "https://id.oidc.se/claim/"
OIDC_SWEDEN_SCOPE_PREFIX = "https://id.oidc.se/scope/"

# MIME types for user messages
TEXT_MIME_TYPE = "text/plain"
MARKDOWN_MIME_TYPE = "text/markdown"

# -- Authentication request parameters --

# A message the OP should display to the user in conjunction with the authentication
USER_MESSAGE_PARAM_NAME = OIDC_SWEDEN_PARAM_PREFIX + "userMessage"

# The authentication service (or mechanism) the RP requests the user to be authenticated at/with
REQUESTED_PROVIDER_PARAM_NAME = OIDC_SWEDEN_PARAM_PREFIX + "authnProvider"

# Client id of the client that requested authentication from a proxy authentication service
ORIGINAL_CLIENT_ID_PARAM_NAME = OIDC_SWEDEN_PARAM_PREFIX + "originalClientId"

# Token describing the client that requested authentication from a proxy authentication service
ORIGINAL_CLIENT_TOKEN_PARAM_NAME = OIDC_SWEDEN_PARAM_PREFIX + "originalClientToken"

# Input for a user signature operation
SIGN_REQUEST_PARAM_NAME = OIDC_SWEDEN_PARAM_PREFIX + "signRequest"

# -- Discovery parameters --

USER_MESSAGE_SUPPORTED_PARAM_NAME = OIDC_SWEDEN_DISCO_PREFIX + "userMessageSupported"

# Only relevant if userMessageSupported is true
USER_MESSAGE_SUPPORTED_MIMETYPES_PARAM_NAME = OIDC_SWEDEN_DISCO_PREFIX + "userMessageSupportedMimeTypes"

REQUESTED_PROVIDER_SUPPORTED_PARAM_NAME = OIDC_SWEDEN_DISCO_PREFIX + "authnProviderSupported"

ORIGINAL_CLIENT_ID_SUPPORTED_PARAM_NAME = OIDC_SWEDEN_DISCO_PREFIX + "originalClientIdSupported"

ORIGINAL_CLIENT_TOKEN_SUPPORTED_PARAM_NAME = OIDC_SWEDEN_DISCO_PREFIX + "originalClientTokenSupported"

# -- Claims --

# Swedish civic registration number ("personnummer"), 12 digits without hyphen
PERSONAL_IDENTITY_NUMBER_CLAIM_NAME = OIDC_SWEDEN_CLAIMS_PREFIX + "personalIdentityNumber"

# Swedish coordination number ("samordningsnummer"), 12 digits without hyphen
COORDINATION_NUMBER_CLAIM_NAME = OIDC_SWEDEN_CLAIMS_PREFIX + "coordinationNumber"

# One of "confirmed", "probable" or "uncertain"
COORDINATION_NUMBER_LEVEL_CLAIM_NAME = OIDC_SWEDEN_CLAIMS_PREFIX + "coordinationNumberLevel"

# A coordination number previously held by a subject that now has a personal identity number
PREVIOUS_COORDINATION_NUMBER_CLAIM_NAME = OIDC_SWEDEN_CLAIMS_PREFIX + "previousCoordinationNumber"

# Swedish organizational number ("organisationsnummer"), 10 digits without hyphen
ORGANIZATION_NUMBER_CLAIM_NAME = OIDC_SWEDEN_CLAIMS_PREFIX + "orgNumber"

# Personal identity at an organization, formatted as personal-id@org-number
ORGANIZATIONAL_AFFILIATION_CLAIM_NAME = OIDC_SWEDEN_CLAIMS_PREFIX + "orgAffiliation"

ORGANIZATION_NAME_CLAIM_NAME = OIDC_SWEDEN_CLAIMS_PREFIX + "orgName"

ORGANIZATIONAL_UNIT_NAME_CLAIM_NAME = OIDC_SWEDEN_CLAIMS_PREFIX + "orgUnit"

# Base64-encoding of the DER-encoded certificate presented by the user
USER_CERTIFICATE_CLAIM_NAME = OIDC_SWEDEN_CLAIMS_PREFIX + "userCertificate"

# Base64-encoding of a signature produced by the user during authentication or signing
USER_SIGNATURE_CLAIM_NAME = OIDC_SWEDEN_CLAIMS_PREFIX + "userSignature"

# Seconds since epoch
CREDENTIALS_VALID_FROM_CLAIM_NAME = OIDC_SWEDEN_CLAIMS_PREFIX + "credentialValidFrom"
CREDENTIALS_VALID_TO_CLAIM_NAME = OIDC_SWEDEN_CLAIMS_PREFIX + "credentialValidTo"

# IPv4 or IPv6 address of the device holding the user credentials
DEVICE_IP_CLAIM_NAME = OIDC_SWEDEN_CLAIMS_PREFIX + "deviceIp"

# Base64 evidence about the authentication process (OCSP response, SAML assertion, signed JWT, ...)
AUTHENTICATION_EVIDENCE_CLAIM_NAME = OIDC_SWEDEN_CLAIMS_PREFIX + "authnEvidence"

# Identity of the provider (mechanism or authority) that authenticated the user, preferably a URI
AUTHENTICATION_PROVIDER_CLAIM_NAME = OIDC_SWEDEN_CLAIMS_PREFIX + "authnProvider"

# ISO 3166-1 alpha-2 country code
COUNTRY_CLAIM_NAME = OIDC_SWEDEN_CLAIMS_PREFIX + "country"

# Full name at the time of birth
BIRTH_NAME_CLAIM_NAME = OIDC_SWEDEN_CLAIMS_PREFIX + "birthName"

PLACE_OF_BIRTH_CLAIM_NAME = OIDC_SWEDEN_CLAIMS_PREFIX + "placeOfbirth"

# Age in years
AGE_CLAIM_NAME = OIDC_SWEDEN_CLAIMS_PREFIX + "age"

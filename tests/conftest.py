# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

import pytest

from oidc_sweden.constants import TEXT_MIME_TYPE
from oidc_sweden.user_message import Message, UserMessage


@pytest.fixture
def sign_message() -> UserMessage:
    """A Swedish/English user message as used for signature requests."""
    return UserMessage(
        messages=[Message("Godkänn underskrift", "sv"), Message("Approve signature", "en")],
        mime_type=TEXT_MIME_TYPE,
    )

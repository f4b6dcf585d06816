# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

"""
The Client Provided User Message request parameter (https://id.oidc.se/param/userMessage).

Wire format::

    {
      "message": "<default text>",
      "message#<language-tag>": "<text>",
      "mime_type": "text/plain"
    }
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_serializer

from oidc_sweden.constants import MARKDOWN_MIME_TYPE, TEXT_MIME_TYPE, USER_MESSAGE_PARAM_NAME
from oidc_sweden.exceptions import (
    DuplicateDefaultError,
    DuplicateLanguageError,
    InvalidLanguageTagError,
    ParseError,
)
from oidc_sweden.language import Language, language_tags_match, parse_language_tag
from oidc_sweden.utils.logger import logger
from oidc_sweden.utils.parsing import load_json_object

__all__ = ["Message", "UserMessage", "PARAMETER_NAME", "TEXT_MIME_TYPE", "MARKDOWN_MIME_TYPE"]

PARAMETER_NAME = USER_MESSAGE_PARAM_NAME

MESSAGE_FIELD = "message"
MESSAGE_FIELD_PREFIX = "message#"
MIME_TYPE_FIELD = "mime_type"


class Message(BaseModel):
    """
    A single message text, optionally tagged with the language it is written in.
    A message without a language tag is the default message.

    Attributes:
        text (str): The message text.
        language (Language | None): The language tag, None for the default message.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    text: str
    language: Language | None = None

    def __init__(self, text: str, language: Language | str | None = None, **data: Any) -> None:
        super().__init__(text=text, language=language, **data)

    @field_validator("language", mode="before")
    @classmethod
    def parse_language(cls, v: Any) -> Language | None:
        if v is None:
            return None
        return parse_language_tag(v)

    @field_serializer("language")
    def serialize_language(self, v: Language | None) -> str | None:
        return v.to_tag() if v is not None else None

    @property
    def field_name(self) -> str:
        """The JSON field this message is encoded under."""
        if self.language is None:
            return MESSAGE_FIELD
        return f"{MESSAGE_FIELD_PREFIX}{self.language.to_tag()}"

    def __str__(self) -> str:
        return f"{self.field_name}={self.text}"


def _add(messages: list[Message], message: Message) -> None:
    if message.language is None:
        if messages and messages[0].language is None:
            raise DuplicateDefaultError("A default message (without language tag) has already been added")
        messages.insert(0, message)
        return

    for existing in messages:
        if existing.language is not None and language_tags_match(existing.language, message.language):
            raise DuplicateLanguageError(
                f"A message for language {message.language.to_tag()} has already been added"
                f" ({existing.language.to_tag()})"
            )
    messages.append(message)


class UserMessage(BaseModel):
    """
    A user message with one or more localized variants and an optional MIME type.

    The default message, if any, is always stored first; tagged messages follow
    in the order they were added. Equality and hashing derive from ``str()``,
    which renders messages in storage order, so two user messages holding the
    same variants added in a different order are not equal.

    Attributes:
        messages (list[Message]): The messages. Use ``add_message`` to extend.
        mime_type (str | None): The MIME type of the message texts.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    messages: list[Message] = Field(default_factory=list)
    mime_type: str | None = None

    @field_validator("messages", mode="after")
    @classmethod
    def check_messages(cls, v: list[Message]) -> list[Message]:
        """Applies the add rules to an initial list of messages."""
        messages: list[Message] = []
        for message in v:
            _add(messages, message)
        return messages

    def add_message(self, message: Message | str, language: Language | str | None = None) -> None:
        """
        Adds a message.

        Args:
            message: A Message, or the message text (in which case ``language`` applies).
            language: The language tag of a text message, None for the default message.

        Raises:
            DuplicateDefaultError: If a default message is added twice.
            DuplicateLanguageError: If a message matching the language of an existing message is added.
            InvalidLanguageTagError: If ``language`` is not a valid language tag.
        """
        if not isinstance(message, Message):
            tag = parse_language_tag(language) if language is not None else None
            message = Message(message, tag)
        _add(self.messages, message)

    def get_message(self, language: Language | str | None = None) -> str | None:
        """
        Gets the message for the given language.

        A stored ``en-US`` message is returned for ``en`` and vice versa, but not for ``en-GB``.
        When no tagged message matches, the default message is returned.

        Args:
            language: The language tag; None asks for the default message.

        Returns:
            The message text, or None. A malformed tag never raises, it gives None.
        """
        if language is None:
            return self.get_default_message()
        try:
            tag = parse_language_tag(language)
        except InvalidLanguageTagError:
            return None

        for message in self.messages:
            if message.language is not None and language_tags_match(message.language, tag):
                return message.text
        return self.get_default_message()

    def get_default_message(self) -> str | None:
        """Gets the message that has no language tag, or None."""
        if self.messages and self.messages[0].language is None:
            return self.messages[0].text
        return None

    @model_serializer(mode="plain")
    def serialize_model(self) -> dict[str, str]:
        o: dict[str, str] = {}
        for message in self.messages:
            o[message.field_name] = message.text
        if self.mime_type is not None:
            o[MIME_TYPE_FIELD] = self.mime_type
        return o

    def to_json_object(self) -> dict[str, str]:
        """Returns the flattened JSON object for the user message."""
        return self.model_dump()

    def to_json(self) -> str:
        """Returns the user message as a JSON string."""
        return self.model_dump_json()

    @classmethod
    def parse(cls, json_object: Mapping[str, Any] | str) -> "UserMessage":
        """
        Parses a JSON object (or its string form) into a UserMessage.

        Raises:
            ParseError: If the object does not follow the user message format.
        """
        json_object = load_json_object(json_object)
        user_message = cls()
        try:
            if MESSAGE_FIELD in json_object:
                text = json_object[MESSAGE_FIELD]
                if not isinstance(text, str):
                    raise ParseError(f"field {MESSAGE_FIELD} expected to be a string")
                user_message.add_message(Message(text))

            for key, text in json_object.items():
                if not key.startswith(MESSAGE_FIELD_PREFIX):
                    continue
                if not isinstance(text, str):
                    raise ParseError(f"field {key} expected to be a string")
                try:
                    tag = parse_language_tag(key[len(MESSAGE_FIELD_PREFIX) :])
                except InvalidLanguageTagError as e:
                    raise ParseError(f"field {key} does not hold a valid language tag - {e}") from e
                user_message.add_message(Message(text, tag))
        except (DuplicateDefaultError, DuplicateLanguageError) as e:
            raise ParseError(str(e)) from e

        if not user_message.messages:
            raise ParseError("missing message field(s)")

        mime_type = json_object.get(MIME_TYPE_FIELD)
        if mime_type is not None:
            if not isinstance(mime_type, str):
                raise ParseError(f"field {MIME_TYPE_FIELD} expected to be a string")
            user_message.mime_type = mime_type

        logger.debug(f"Parsed user message with {len(user_message.messages)} message(s)")
        return user_message

    def __str__(self) -> str:
        parts = [str(message) for message in self.messages]
        parts.append(f"{MIME_TYPE_FIELD}={self.mime_type if self.mime_type is not None else 'not-set'}")
        return ", ".join(parts)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, UserMessage):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))

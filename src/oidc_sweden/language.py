# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

"""
Language tag handling for localized messages.

Tags are parsed and represented by ``langcodes.Language``. Only the primary
language subtag and the region (territory) subtag take part in matching.
"""

from langcodes import Language
from langcodes.tag_parser import LanguageTagError

from oidc_sweden.exceptions import InvalidLanguageTagError

__all__ = ["Language", "parse_language_tag", "language_tags_match"]


def parse_language_tag(tag: str | Language) -> Language:
    """
    Parses a language tag string, such as ``sv`` or ``en-US``.

    Only the letter case is canonicalized, so deprecated subtags such as ``iw``
    keep their form and a parsed tag renders back to the string it came from.
    Grandfathered tags (``en-GB-oed``, ``i-klingon``, ``no-bok``) and the
    undetermined language ``und`` are rejected.

    Args:
        tag: The tag string, or an already parsed tag (checked the same way).

    Returns:
        The parsed language tag.

    Raises:
        InvalidLanguageTagError: If the string is not a well-formed tag made of registered subtags.
    """
    if isinstance(tag, Language):
        text = tag.to_tag()
    elif isinstance(tag, str) and tag.strip():
        text = tag.strip()
    else:
        raise InvalidLanguageTagError(f"Invalid language tag - {tag!r}")

    try:
        language = Language.get(text, normalize=False)
        # Validity is judged on the normalized form, deprecated subtags included
        normalized = Language.get(text)
    except LanguageTagError as e:
        raise InvalidLanguageTagError(f"Invalid language tag - {text}") from e

    if normalized.language in (None, "und") or not normalized.is_valid():
        raise InvalidLanguageTagError(f"Invalid language tag - {text}")
    # Grandfathered tags come back unparsed, the whole tag in the language slot
    if "-" in (language.language or ""):
        raise InvalidLanguageTagError(f"Invalid language tag - {text} (grandfathered, use {normalized.to_tag()})")
    if language.to_tag().lower() != text.lower():
        raise InvalidLanguageTagError(f"Invalid language tag - {text} (irregular form of {language.to_tag()})")
    return language


def language_tags_match(a: Language, b: Language) -> bool:
    """
    Region-tolerant comparison of two tags.

    The primary languages must be equal. If both tags carry a region the regions
    must also be equal, otherwise the primary language alone decides. So ``en``
    matches ``en-US`` (both ways) but ``en-GB`` does not match ``en-US``.
    """
    if a.language != b.language:
        return False
    if a.territory is not None and b.territory is not None:
        return a.territory == b.territory
    return True

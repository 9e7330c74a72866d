"""Identifier sanitization for operation and parameter names.

Every name the extractor emits goes through :func:`sanitize`: a leading run of
non-letters is dropped, each run of characters outside ``[A-Za-z0-9_-]`` is
replaced with ``-``, and the result is camel-cased. The output therefore only
contains ASCII letters and digits and always starts with a letter (or is
empty).

Reserved words are handled differently for the two kinds of names:

* operation names that collide with a reserved word are *disambiguated* with
  the operation group (``repos/delete`` -> ``deleteRepos``) or the HTTP method
  (``delete`` -> ``deleteDelete``);
* parameter names that collide are *prefixed* with an underscore
  (``default`` -> ``_default``).

Both word sets default to :mod:`oasvc.constants` and are passed in explicitly
so a different target language can supply its own.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Iterable
from typing import Final, Optional

from oasvc.constants import (
    OPERATION_RESERVED_WORDS,
    PARAMETER_RESERVED_WORDS,
    VERSION_PLACEHOLDER,
)

_LEADING_NON_LETTER_PATTERN: Final = re.compile(r"^[^a-zA-Z]+")
_INVALID_CHARS_PATTERN: Final = re.compile(r"[^A-Za-z0-9_-]+")
_ACRONYM_PATTERN: Final = re.compile(r"([A-Z])([A-Z][a-z])")
_LOWER_UPPER_PATTERN: Final = re.compile(r"([a-z])([A-Z])")
_SEPARATOR_PATTERN: Final = re.compile(r"[-_.\s]+")
_DIGIT_LETTER_PATTERN: Final = re.compile(r"(\d+)([a-z])")
_PLACEHOLDER_PATTERN: Final = re.compile(r"\{.*?\}")


def camelcase(value: str) -> str:
    """Convert *value* into camelCase.

    Existing lower-to-upper boundaries and acronym runs are treated as word
    breaks, words are lower-cased, and a letter directly following a digit
    run is upper-cased.

    Examples:
        >>> camelcase("get-thread-subscription")
        'getThreadSubscription'
        >>> camelcase("getHTTPResponse")
        'getHttpResponse'
        >>> camelcase("v1beta_items")
        'v1BetaItems'
    """
    spaced = _ACRONYM_PATTERN.sub(r"\1-\2", value)
    spaced = _LOWER_UPPER_PATTERN.sub(r"\1-\2", spaced)
    words = [word for word in _SEPARATOR_PATTERN.split(spaced.lower()) if word]
    if not words:
        return ""
    joined = words[0] + "".join(word.capitalize() for word in words[1:])
    return _DIGIT_LETTER_PATTERN.sub(lambda m: m.group(1) + m.group(2).upper(), joined)


def sanitize(raw: str) -> str:
    """Turn an arbitrary string into a camelCase identifier.

    Examples:
        >>> sanitize("123-filter.some Property")
        'filterSomeProperty'
    """
    clean = _LEADING_NON_LETTER_PATTERN.sub("", raw)
    clean = _INVALID_CHARS_PATTERN.sub("-", clean).strip()
    return camelcase(clean)


def operation_name(
    path: str,
    method: str,
    declared_id: Optional[str] = None,
    reserved_words: Iterable[str] = OPERATION_RESERVED_WORDS,
    version_placeholder: str = VERSION_PLACEHOLDER,
) -> str:
    """Return the generated method name for an operation.

    With a declared ``operationId`` the final ``/``-separated segment is used.
    Without one, a name is synthesized from the method and the path, dropping
    the segment that holds *version_placeholder* and every ``{...}``
    placeholder.

    Args:
        path: The path template, e.g. ``/repos/{owner}/{repo}``.
        method: The HTTP method (any case).
        declared_id: The operation's ``operationId``, if any.
        reserved_words: Names that must be disambiguated.
        version_placeholder: The placeholder marking a version segment.

    Examples:
        >>> operation_name("/x", "get", "activity/get-thread-subscription")
        'getThreadSubscription'
        >>> operation_name("/x", "delete", "repos/delete")
        'deleteRepos'
        >>> operation_name("/{api-version}/users/{id}", "get")
        'getUsers'
    """
    if declared_id:
        segments = declared_id.split("/")
        name = sanitize(segments[-1])
        if name not in frozenset(reserved_words):
            return name
        if len(segments) > 1:
            return sanitize(f"{name}-{segments[0]}")
        return sanitize(f"{method}-{name}")

    without_version = re.sub(
        r"[^/]*?" + re.escape(version_placeholder) + r".*?/", "", path
    )
    remainder = _PLACEHOLDER_PATTERN.sub("", without_version).replace("/", "-")
    return sanitize(f"{method}-{remainder}")


@functools.lru_cache(maxsize=8)
def _reserved_pattern(reserved_words: frozenset[str]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(word) for word in sorted(reserved_words))
    return re.compile(rf"^({alternatives})$")


def parameter_name(
    raw: str,
    reserved_words: Iterable[str] = PARAMETER_RESERVED_WORDS,
) -> str:
    """Return the identifier used for a parameter in a generated signature.

    Examples:
        >>> parameter_name("filter.someProperty")
        'filterSomeProperty'
        >>> parameter_name("default")
        '_default'
    """
    name = sanitize(raw)
    words = frozenset(reserved_words)
    if not words:
        return name
    return _reserved_pattern(words).sub(r"_\1", name)

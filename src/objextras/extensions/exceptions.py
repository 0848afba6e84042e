"""Exception message aggregation.

Collects the messages of an exception and of every exception it was raised
from (``__cause__``) or while handling (``__context__``) into one string.
The text helpers used along the way (``to_sentence``, ``escape``) live here
too.

Usage:
    try:
        load_config()
    except Exception as e:
        print(get_messages(e))        # "Cannot load config. File not found."
        print(get_safe_messages(e))   # only SafeError messages
"""

from __future__ import annotations

import re
import unicodedata

from objextras.errors import SafeError

_WHITESPACE = re.compile(r"\s+")


def to_sentence(text: str | None, trim_start: bool = True, trim_end: bool = True) -> str:
    """Turn text into a sentence by ending it with a period if needed.

    Args:
        text: Text to convert.
        trim_start: Strip leading whitespace.
        trim_end: Strip trailing whitespace.

    Returns:
        The text ending with punctuation, or "" for empty text.
    """
    if not text:
        return ""
    if trim_start:
        text = text.lstrip()
    if trim_end:
        text = text.rstrip()
    if not text:
        return ""
    return text if unicodedata.category(text[-1]).startswith("P") else f"{text}."


def escape(text: str | None, char: str = "'", replacement: str = "''") -> str | None:
    """Replace every occurrence of char in text.

    The defaults double single quotes, as SQL string literals expect:
    "It's a test" becomes "It''s a test".

    Args:
        text: Text to escape. None and "" are returned unchanged.
        char: Character to escape.
        replacement: Text written in place of each occurrence.

    Returns:
        The escaped text.
    """
    if not text:
        return text
    return text.replace(char, replacement)


def _message(exc: BaseException) -> str:
    if isinstance(exc, BaseExceptionGroup):
        return exc.message
    return str(exc)


def _chain(exc: BaseException) -> list[BaseException]:
    chain: list[BaseException] = []
    current: BaseException | None = exc
    while current is not None and all(current is not seen for seen in chain):
        chain.append(current)
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None
    return chain


def _leaves(group: BaseExceptionGroup) -> list[BaseException]:
    leaves: list[BaseException] = []
    for inner in group.exceptions:
        if isinstance(inner, BaseExceptionGroup):
            leaves.extend(_leaves(inner))
        else:
            leaves.append(inner)
    return leaves


def get_messages(
    exc: BaseException | None,
    raw: bool = False,
    kind: type[BaseException] = BaseException,
) -> str:
    """Collect the messages of exc and the exceptions in its chain.

    An exception group contributes the messages of each of its (flattened)
    member exceptions.

    Args:
        exc: Exception to read; None gives "".
        raw: Keep messages as-is. Otherwise each message becomes a sentence,
            a message repeating the previous one is dropped, and whitespace
            is collapsed.
        kind: Only include exceptions of this type.

    Returns:
        Messages separated by single spaces.
    """
    if exc is None:
        return ""

    messages: list[str] = []
    if isinstance(exc, BaseExceptionGroup):
        for inner in _leaves(exc):
            text = get_messages(inner, raw, kind)
            if text:
                messages.append(text)
    else:
        for link in _chain(exc):
            if not isinstance(link, kind):
                continue
            message = _message(link) if raw else to_sentence(_message(link))
            if not message:
                continue
            if raw or not messages or not messages[-1].endswith(message):
                messages.append(message)

    joined = " ".join(messages)
    return joined if raw else _WHITESPACE.sub(" ", joined).strip()


def get_safe_messages(exc: BaseException | None, raw: bool = False) -> str:
    """Collect only the messages of SafeError exceptions in the chain of exc."""
    return get_messages(exc, raw, kind=SafeError)

"""Tests for exception message aggregation."""

import pytest

from objextras import SafeError, escape, get_messages, get_safe_messages, to_sentence


def _chain(*messages, kind=Exception):
    """Build kind(messages[0]) caused by kind(messages[1]) caused by ..."""
    errors = [kind(message) for message in messages]
    for outer, inner in zip(errors, errors[1:], strict=False):
        outer.__cause__ = inner
    return errors[0]


def test_messages_follow_the_cause_chain():
    error = _chain("OUTER EXCEPTION", "INNER EXCEPTION 1", "INNER EXCEPTION 2")
    assert get_messages(error) == "OUTER EXCEPTION. INNER EXCEPTION 1. INNER EXCEPTION 2."


def test_messages_follow_implicit_context():
    try:
        try:
            raise ValueError("Cannot parse value")
        except ValueError:
            raise RuntimeError("Cannot load settings")  # noqa: B904
    except RuntimeError as e:
        assert get_messages(e) == "Cannot load settings. Cannot parse value."


def test_suppressed_context_is_skipped():
    try:
        try:
            raise ValueError("Cannot parse value")
        except ValueError:
            raise RuntimeError("Cannot load settings") from None
    except RuntimeError as e:
        assert get_messages(e) == "Cannot load settings."


def test_whitespace_is_collapsed():
    message = " This is \t an error  \r\n\rmessage\r    with   irregular \n spacing \r"
    assert get_messages(Exception(message)) == "This is an error message with irregular spacing."


def test_repeated_messages_are_dropped():
    error = _chain("Request failed", "Request failed.", "Timeout")
    assert get_messages(error) == "Request failed. Timeout."


def test_raw_messages_are_kept_as_is():
    error = _chain("first  part", "second")
    assert get_messages(error, raw=True) == "first  part second"


def test_exception_group_contributes_each_member():
    group = ExceptionGroup(
        "Aggregate exception",
        [ValueError("Inner exception 1"), ExceptionGroup("nested", [KeyError("k")])],
    )
    # A quote is punctuation, so no period follows it
    assert get_messages(group) == "Inner exception 1. 'k'"


def test_exception_group_inside_chain_uses_its_message():
    outer = Exception("Outer exception")
    outer.__cause__ = ExceptionGroup("Aggregate exception", [ValueError("Inner")])
    assert get_messages(outer) == "Outer exception. Aggregate exception."


def test_messages_filtered_by_kind():
    error = RuntimeError("Lookup failed")
    error.__cause__ = KeyError("Missing key")
    assert get_messages(error, kind=KeyError) == "'Missing key'"
    assert get_messages(error, kind=RuntimeError) == "Lookup failed."


def test_safe_messages_skip_unsafe_exceptions():
    """CRITICAL: Only SafeError messages reach end users.

    Why: Inner exceptions often carry paths, queries or credentials.
    """
    error = SafeError("Safe Outer Exception")
    error.__cause__ = SafeError("Safe Inner Exception")
    error.__cause__.__cause__ = Exception("Unsafe Exception")

    assert get_safe_messages(error) == "Safe Outer Exception. Safe Inner Exception."
    assert get_messages(error, kind=SafeError) == get_safe_messages(error)


def test_none_gives_empty_text():
    assert get_messages(None) == ""
    assert get_safe_messages(None) == ""


def test_empty_messages_are_skipped():
    error = _chain("Outer", "")
    assert get_messages(error) == "Outer."


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Hello", "Hello."),
        ("Hello.", "Hello."),
        ("Hello!", "Hello!"),
        ("Is it?", "Is it?"),
        ("(see log)", "(see log)"),
        ("  padded  ", "padded."),
        ("", ""),
        ("   ", ""),
        (None, ""),
    ],
)
def test_to_sentence(text, expected):
    assert to_sentence(text) == expected


def test_to_sentence_without_trimming():
    assert to_sentence("  indented", trim_start=False) == "  indented."
    assert to_sentence("trailing  ", trim_end=False) == "trailing  ."


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("It's a test", "It''s a test"),
        ("'quoted'", "''quoted''"),
        ("plain", "plain"),
        ("", ""),
        (None, None),
    ],
)
def test_escape_doubles_single_quotes(text, expected):
    assert escape(text) == expected


def test_escape_with_custom_character():
    assert escape('say "hi"', '"', '\\"') == 'say \\"hi\\"'
    assert escape("a/b/c", "/", ".") == "a.b.c"

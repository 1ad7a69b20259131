"""Tests for the one-call parse facade."""

from __future__ import annotations

import logging

import pytest

from artist_credits import (
    Artist,
    ArtistList,
    ExpectedRightBracketError,
    InsufficientTokensError,
    parse_artist_list,
)


def test_parse_returns_tree() -> None:
    """Parsing produces the same tree as the underlying builder."""

    result = parse_artist_list("放課後ティータイム（平沢唯（豊崎愛生）、秋山澪（日笠陽子））")

    assert result.names() == ["放課後ティータイム"]
    group = result[0]
    assert group.has_children
    assert group.children is not None
    assert group.children.names() == ["平沢唯", "秋山澪"]
    assert group.children[1] == Artist(
        name="秋山澪", children=ArtistList((Artist(name="日笠陽子"),))
    )


def test_parse_error_carries_source_and_caret() -> None:
    """Errors point at the failing offset within the original text."""

    with pytest.raises(ExpectedRightBracketError) as excinfo:
        _ = parse_artist_list("A（B")

    error = excinfo.value
    assert error.source == "A（B"
    lines = str(error).splitlines()
    assert lines[0] == "Expected right bracket at offset 3:"
    assert lines[1] == "    A（B"
    # The full-width bracket occupies two cells.
    assert lines[2] == "    " + " " * 4 + "^"


def test_parse_error_without_source_mentions_position() -> None:
    """A bare error still reports where it happened."""

    error = InsufficientTokensError(offset=0, token_index=0)

    assert str(error) == "Insufficient tokens (offset 0, token 0)"


def test_parse_empty_input_fails() -> None:
    """Empty input has no artists to return."""

    with pytest.raises(InsufficientTokensError):
        _ = parse_artist_list("")


def test_parse_logs_success_event(caplog: pytest.LogCaptureFixture) -> None:
    """Successful parses emit a structured debug event."""

    caplog.set_level(logging.DEBUG, logger="artist_credits")

    _ = parse_artist_list("A、B")

    events = [getattr(record, "credit_event", None) for record in caplog.records]
    assert "credits.parse.success" in events
    success = next(r for r in caplog.records if getattr(r, "credit_event", None) == "credits.parse.success")
    assert getattr(success, "artist_count") == 2
    assert getattr(success, "token_count") == 3


def test_parse_warns_on_trailing_tokens(caplog: pytest.LogCaptureFixture) -> None:
    """Unconsumed tokens after the artist list are reported, not rejected."""

    caplog.set_level(logging.DEBUG, logger="artist_credits")

    result = parse_artist_list("A）B")

    assert result.names() == ["A"]
    trailing = [
        r for r in caplog.records if getattr(r, "credit_event", None) == "credits.parse.trailing"
    ]
    assert len(trailing) == 1
    assert trailing[0].levelno == logging.WARNING
    assert "）B" in trailing[0].getMessage()
    assert getattr(trailing[0], "offset") == 1


def test_parse_trailing_tokens_at_debug_when_configured(caplog: pytest.LogCaptureFixture) -> None:
    """Trailing token reports can be demoted to debug level."""

    caplog.set_level(logging.DEBUG, logger="artist_credits")

    _ = parse_artist_list("A（B）C", warn_on_trailing_tokens=False)

    trailing = [
        r for r in caplog.records if getattr(r, "credit_event", None) == "credits.parse.trailing"
    ]
    assert [r.levelno for r in trailing] == [logging.DEBUG]


def test_parse_error_is_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    """Failures are logged as structured events before being raised."""

    caplog.set_level(logging.DEBUG, logger="artist_credits")

    with pytest.raises(InsufficientTokensError):
        _ = parse_artist_list("A、")

    errors = [
        r for r in caplog.records if getattr(r, "credit_event", None) == "credits.parse.error"
    ]
    assert len(errors) == 1
    assert getattr(errors[0], "offset") == 2

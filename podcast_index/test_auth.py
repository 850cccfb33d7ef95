"""
Tests for request signing.
"""

import hashlib

import pytest

from podcast_index import Credentials, SigningError, sign


def test_sign_matches_sha1_of_key_secret_and_seconds():
    headers = sign("KEY", "SECRET", 1_700_000_000_999)

    expected = hashlib.sha1(b"KEYSECRET1700000000").hexdigest()
    assert headers.timestamp == 1_700_000_000
    assert headers.authorization == expected
    assert headers.key == "KEY"


def test_sign_is_deterministic():
    assert sign("k", "s", 1_650_000_000_000) == sign("k", "s", 1_650_000_000_000)


@pytest.mark.parametrize(
    "args",
    [("k2", "s", 1_650_000_000_000), ("k", "s2", 1_650_000_000_000), ("k", "s", 1_650_000_001_000)],
)
def test_changing_any_input_changes_the_digest(args):
    assert sign(*args).authorization != sign("k", "s", 1_650_000_000_000).authorization


def test_same_second_gives_same_signature():
    assert sign("k", "s", 1_000).authorization == sign("k", "s", 1_999).authorization


def test_header_values():
    headers = sign("KEY", "SECRET", 1_700_000_000_000).as_headers()

    assert headers["X-Auth-Key"] == "KEY"
    assert headers["X-Auth-Date"] == "1700000000"
    assert headers["Authorization"] == hashlib.sha1(b"KEYSECRET1700000000").hexdigest()


def test_secret_never_appears_in_result():
    headers = sign("KEY", "hunter2", 1_700_000_000_000)

    assert "hunter2" not in repr(headers)
    assert "hunter2" not in headers.as_headers().values()


def test_credentials_repr_hides_secret():
    assert "hunter2" not in repr(Credentials("KEY", "hunter2"))


def test_sign_defaults_to_current_time(monkeypatch):
    monkeypatch.setattr("podcast_index.auth.time.time", lambda: 1_700_000_123.75)

    assert sign("k", "s").timestamp == 1_700_000_123


@pytest.mark.parametrize("now", [-1, float("nan"), float("inf"), "1700000000", True, 10**400])
def test_invalid_clock_readings_are_rejected(now):
    with pytest.raises(SigningError):
        sign("k", "s", now)

from __future__ import annotations

import uuid

import pytest

from src.staff_checkin.staff_checkin.checkin.token import (
    CheckinToken,
    from_base36,
    issue_token,
    parse_token,
    to_base36,
)
from src.staff_checkin.staff_checkin.common.datetime_utils import epoch_ms
from src.staff_checkin.staff_checkin.core.exceptions import InvalidTokenFormatError, InvalidTokenTimestampError


@pytest.mark.parametrize("value, expected", [(0, "0"), (35, "z"), (36, "10"), (1295, "zz"), (46656, "1000")])
def test_to_base36(value, expected):
    assert to_base36(value) == expected
    assert from_base36(expected) == value


def test_base36_matches_int_parsing_for_epoch_millis(fixed_now):
    ms = epoch_ms(fixed_now)
    assert ms == 1769934600000
    assert int(to_base36(ms), 36) == ms
    assert to_base36(ms) == to_base36(ms).lower()


def test_issued_token_splits_into_random_part_and_timestamp(fixed_now):
    token = issue_token(fixed_now)

    parts = str(token).split(".")
    assert len(parts) == 2
    assert uuid.UUID(parts[0])
    assert from_base36(parts[1]) == epoch_ms(fixed_now)
    assert parse_token(str(token)) == token


def test_issued_tokens_are_unique(fixed_now):
    assert str(issue_token(fixed_now)) != str(issue_token(fixed_now))


def test_falls_back_to_weak_random_without_os_entropy(monkeypatch, fixed_now):
    def no_entropy():
        raise NotImplementedError

    monkeypatch.setattr(uuid, "uuid4", no_entropy)
    token = issue_token(fixed_now)

    assert token.random_component.endswith("-" + to_base36(epoch_ms(fixed_now)))
    assert parse_token(str(token)).issued_at_ms == epoch_ms(fixed_now)


@pytest.mark.parametrize("raw", ["no-dot-here", "a.b.c", "", "x.y.z.w"])
def test_parse_rejects_wrong_number_of_parts(raw):
    with pytest.raises(InvalidTokenFormatError):
        parse_token(raw)


@pytest.mark.parametrize("raw", ["abc.", "abc.!!", "abc.-5", "abc.0", "abc. 12", "abc.1_0"])
def test_parse_rejects_bad_timestamp(raw):
    with pytest.raises(InvalidTokenTimestampError):
        parse_token(raw)


def test_age_is_measured_from_issue_time(fixed_now):
    token = CheckinToken(random_component="r", issued_at_ms=epoch_ms(fixed_now) - 1500)
    assert token.age_ms(fixed_now) == 1500

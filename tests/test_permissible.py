"""
is_permissible: fixed repetition / sequence tables + hypothesis properties
(definition, monotonicity, determinism).
"""
import sys

import pytest
from hypothesis import given, strategies as st

from pwstrength import (
    is_permissible, isPermissible,
    max_repetition_count, max_sequence_length,
    maxRepetitionCount, maxSequenceLength,
)

UNBOUNDED = sys.maxsize

_threshold = st.integers(min_value=-3, max_value=15)


@pytest.mark.parametrize("password, max_rep, expected", [
    ("abcdefg", 0, False),
    ("password", 0, False),
    ("password", 1, False),
    ("password", 2, True),
    ("touchwood", 2, False),
    ("touchwood", 3, True),
    # case-sensitive: 'o' ×3 and 'e' ×3 ('O' in "Over" is a different char)
    ("TheQuickBrownFoxJumpsOverTheLazyDog", 2, False),
    ("TheQuickBrownFoxJumpsOverTheLazyDog", 3, True),
])
def test_repetition_only(password, max_rep, expected):
    assert is_permissible(password, max_rep, UNBOUNDED) is expected


@pytest.mark.parametrize("password, max_seq, expected", [
    ("abcdef", 0, False),
    ("abcdef", 5, False),
    ("abcdef", 6, True),
    ("0123456789", 9, False),
    ("0123456789", 10, True),
    ("/012345678", 8, False),
    ("/012345678", 9, True),
])
def test_sequence_only(password, max_seq, expected):
    assert is_permissible(password, UNBOUNDED, max_seq) is expected


def test_empty_and_none_always_pass_non_negative_limits():
    assert is_permissible(None, 0, 0)
    assert is_permissible("", 0, 0)


def test_negative_threshold_rejects_everything():
    assert not is_permissible("a", -1, UNBOUNDED)
    assert not is_permissible("", -1, 0)


def test_camel_case_aliases():
    assert maxRepetitionCount("aaaaa") == 5
    assert maxSequenceLength("abcdef") == 6
    assert isPermissible("abc", 1, 3)


# ----------------------------------------------------------------------
@given(st.text(max_size=30), _threshold, _threshold)
def test_defined_by_metrics(password, r, s):
    assert is_permissible(password, r, s) == (
        max_repetition_count(password) <= r and max_sequence_length(password) <= s
    )


@given(
    st.text(max_size=30), _threshold, _threshold,
    st.integers(min_value=0, max_value=5), st.integers(min_value=0, max_value=5),
)
def test_monotone_in_thresholds(password, r, s, dr, ds):
    if is_permissible(password, r, s):
        assert is_permissible(password, r + dr, s + ds)


@given(st.one_of(st.none(), st.text(max_size=30)))
def test_deterministic(password):
    assert max_repetition_count(password) == max_repetition_count(password)
    assert max_sequence_length(password) == max_sequence_length(password)

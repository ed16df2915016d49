from __future__ import annotations

import pytest

from feedback_client import durations
from feedback_client.feedback_util import FeedbackUtil


def test_duration_presets_hold_expected_values():
    assert durations.LENGTH_DEFAULT == 5000
    assert durations.LENGTH_MEDIUM == 8000
    assert durations.LENGTH_LONG == 15000


def test_facade_exposes_the_same_presets():
    assert FeedbackUtil.LENGTH_DEFAULT == durations.LENGTH_DEFAULT
    assert FeedbackUtil.LENGTH_MEDIUM == durations.LENGTH_MEDIUM
    assert FeedbackUtil.LENGTH_LONG == durations.LENGTH_LONG


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, durations.BANNER_LENGTH_LONG),
        ("bogus", durations.BANNER_LENGTH_LONG),
        (-10, 0),
        (7000, 7000),
        ("2500", 2500),
    ],
)
def test_coerce_duration(value, expected):
    assert durations.coerce_duration(value, durations.BANNER_LENGTH_LONG) == expected

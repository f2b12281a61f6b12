import re
from datetime import UTC, timedelta, timezone

import pytest

from readorder.misc import set_default_timezone, timestamp_slug, tz_now


@pytest.fixture(autouse=True)
def reset_timezone():
    set_default_timezone(UTC)
    yield
    set_default_timezone(UTC)


def test_tz_now_reflects_configured_timezone():
    set_default_timezone(timezone(timedelta(hours=9)))

    now = tz_now()

    assert now.utcoffset() == timedelta(hours=9)


def test_set_default_timezone_accepts_name():
    set_default_timezone("UTC")

    assert tz_now().utcoffset() == timedelta(0)


def test_timestamp_slug_is_filesystem_safe():
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}_\d{2}-\d{2}-\d{2}", timestamp_slug())

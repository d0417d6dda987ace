"""Shared fixtures for the crawler tests."""

from __future__ import annotations

import pytest

from tests.helpers import FakeSite, SleepRecorder


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def fake_site() -> FakeSite:
    return FakeSite()

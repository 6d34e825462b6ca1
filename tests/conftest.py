"""Shared fixtures.

  • make_picker(*values) - RandomPicker stub returning scripted values, recording calls
  • app_container        - container initialized with a scripted picker
"""

import pytest

from app.container import container


class ScriptedPicker:
    """Returns queued values in order; falls back to `low` once exhausted."""

    def __init__(self, *values: int):
        self.values = list(values)
        self.calls: list[tuple[int, int]] = []

    def pick(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        return self.values.pop(0) if self.values else low


@pytest.fixture
def make_picker():
    return ScriptedPicker


@pytest.fixture
def picker():
    return ScriptedPicker()


@pytest.fixture
def app_container(picker):
    container.reset()
    container.init(picker=picker)
    yield container
    container.reset()

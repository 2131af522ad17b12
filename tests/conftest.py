from __future__ import annotations

import pytest

from fakes import FakeSpawner


@pytest.fixture
def spawner() -> FakeSpawner:
    return FakeSpawner()

from __future__ import annotations

import os
from collections.abc import Generator
from datetime import date

import pytest
from fastapi.testclient import TestClient

os.environ["APP_ENV"] = "test"
os.environ["SCHEDULE_APPLY_MODE"] = "append"

from study_planner.main import create_app  # noqa: E402
from study_planner.services.ids import SequentialAllocator  # noqa: E402
from study_planner.state.holder import StateHolder  # noqa: E402

TODAY = date(2025, 3, 3)


@pytest.fixture()
def today() -> date:
    return TODAY


@pytest.fixture()
def holder() -> StateHolder:
    return StateHolder()


@pytest.fixture()
def client(holder: StateHolder) -> Generator[TestClient, None, None]:
    app = create_app(holder=holder, allocator=SequentialAllocator("rec"))
    with TestClient(app) as test_client:
        yield test_client

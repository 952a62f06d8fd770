from __future__ import annotations

import pytest

from etl_santa.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(debug=False, info_url="https://santa.test/info", timeout_seconds=5)

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

import logtest

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def logger() -> Generator[logtest.Logger]:
    """A handle over the process-wide capture queue, drained before and
    after the test.

    Tests using it must not run concurrently with each other.
    """
    logger = logtest.start()
    list(logger)

    yield logger

    list(logger)

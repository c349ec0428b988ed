import logging
from concurrent.futures import Future
from unittest.mock import MagicMock

import pytest

from appenlight_reporter import Reporter


class ImmediateExecutor:
    """Runs submitted work inline so futures are already done when returned."""

    def submit(self, fn, *args, **kwargs):
        future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as e:
            future.set_exception(e)
        return future

    def shutdown(self, wait=True):
        pass


def _response(text="OK", status_code=200):
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text
    return resp


@pytest.fixture
def make_response():
    return _response


@pytest.fixture
def config():
    return {"api_key": "secret", "endpoint": "https://example.test/api/", "server_name": "web-1"}


@pytest.fixture
def reporter(config):
    return Reporter(config, executor=ImmediateExecutor())


@pytest.fixture
def reporter_log(caplog):
    """caplog wired straight to the reporter logger, which does not propagate."""
    logger = logging.getLogger("appenlight_reporter")
    logger.addHandler(caplog.handler)
    yield caplog
    logger.removeHandler(caplog.handler)

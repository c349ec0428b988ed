# reporter.py - sends metrics and error/slow-call reports to AppEnlight
"""
Reporter holds one resolved ReporterConfig and issues one POST per call.

Every send returns immediately with a concurrent.futures.Future that resolves
to a RequestResult. Transport errors and non-"OK" bodies never raise: they are
logged and handed back through the result (and the optional callback).
"""
import socket
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, NamedTuple, Optional

import requests

from .api_client import APIClient
from .config import ReporterConfig
from .log import get_logger
from .payloads import build_metrics_payload, build_report_payload

logger = get_logger()

GENERAL_METRICS_API = "general_metrics"
REPORTS_API = "reports"


class RequestResult(NamedTuple):
    error: Optional[BaseException]
    response: Optional[requests.Response]
    body: Any

    @property
    def ok(self) -> bool:
        return isinstance(self.body, str) and self.body.startswith("OK")


Callback = Callable[[Optional[BaseException], Optional[requests.Response], Any], Any]


class Reporter:
    def __init__(self, config, hostname_provider: Callable[[], str] = socket.gethostname,
                 client: Optional[APIClient] = None, executor=None):
        # resolve() raises ConfigurationError before anything is stored
        self.config = ReporterConfig.resolve(config, hostname_provider)
        self.client = client or APIClient(self.config.endpoint, self.config.api_key)
        self._executor = executor or ThreadPoolExecutor(thread_name_prefix="appenlight")

    def make_request(self, api_name: str, data, callback: Optional[Callback] = None) -> Future:
        """
        POST data to <endpoint><api_name>?protocol_version=0.5 in the background.

        The callback, if given, is called exactly once with (error, response, body).
        """
        future = self._executor.submit(self._send, api_name, data)
        if callback is not None:
            future.add_done_callback(lambda f: callback(*f.result()))
        return future

    def send_metrics(self, namespace: str, vals, callback: Optional[Callback] = None) -> Future:
        """vals: [[key, value], ...], e.g. [["counter_a", 15.5], ["counter_b", 63]]"""
        return self.make_request(
            GENERAL_METRICS_API, build_metrics_payload(namespace, vals, self.config), callback)

    def send_report(self, options, callback: Optional[Callback] = None) -> Future:
        """Send an error or slow-call report. options is copied, never modified."""
        return self.make_request(
            REPORTS_API, build_report_payload(options, self.config), callback)

    def close(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def _send(self, api_name: str, data) -> RequestResult:
        try:
            resp = self.client.post(api_name, data)
            result = RequestResult(None, resp, resp.text)
        except requests.RequestException as e:
            result = RequestResult(e, getattr(e, "response", None), None)
        except (TypeError, ValueError) as e:
            # body could not be JSON encoded; nothing was sent
            result = RequestResult(e, None, None)

        if result.ok:
            logger.debug("AppEnlight %s sent", api_name)
        else:
            logger.error("AppEnlight REQUEST FAILED %r %r", result.body, data)
        return result

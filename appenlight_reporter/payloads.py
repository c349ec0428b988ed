# payloads.py - shapes the JSON bodies for the general_metrics and reports APIs
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from .config import ReporterConfig

CLIENT_NAME = "node-appenlight-reporter"
LANGUAGE = "node.js"


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2020-01-01T00:00:00.000Z"""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_metrics_payload(namespace: str, vals, config: ReporterConfig,
                          timestamp: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    Batch of one general_metrics entry.

    vals is a sequence of [key, value] pairs and is not validated. Global tags
    from the config are appended after the caller's values.
    """
    tags = list(vals) if vals is not None else []
    tags.extend([k, v] for k, v in config.tags)
    return [{
        "timestamp": timestamp or utc_timestamp(),
        "namespace": namespace,
        "server_name": config.server_name,
        "tags": tags,
    }]


def build_report_payload(options: Optional[Mapping[str, Any]], config: ReporterConfig,
                         end_time: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    Batch of one reports entry built from a copy of options.

    client and language are always overwritten; server and end_time are only
    filled in when the caller left them empty.

    Keys the reports API understands: error, message, url, http_status,
    priority, request_id, start_time, end_time, server, tags, extra,
    request_stats, traceback, slow_calls, user, username, view_name, ip,
    user_agent. Anything else is passed through as-is.
    """
    report = dict(options or {})
    report["client"] = CLIENT_NAME
    report["language"] = LANGUAGE
    if not report.get("server"):
        # config.server is normally unset; server_name keeps server populated
        report["server"] = config.server or config.server_name
    if not report.get("end_time"):
        report["end_time"] = end_time or utc_timestamp()
    return [report]

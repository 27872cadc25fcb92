"""Datadog monitor API helpers."""

from __future__ import annotations

import logging
from typing import Any

from .client import Client
from .models.monitor import Monitor

__all__ = [
    "create_monitor",
    "update_monitor",
    "get_monitor",
    "get_monitors",
    "get_monitors_by_name",
    "get_monitors_by_tags",
    "delete_monitor",
    "mute_monitors",
    "unmute_monitors",
    "mute_monitor",
    "unmute_monitor",
]

logger = logging.getLogger(__name__)


def _monitor_list(data: Any) -> list[Monitor]:
    return [Monitor.from_dict(entry) for entry in data or []]


def create_monitor(client: Client, monitor: Monitor) -> Monitor:
    """Create a monitor and return it as stored, including its new id."""
    data = client.do_json_request("POST", "/v1/monitor", monitor)
    created = Monitor.from_dict(data or {})
    logger.info("Created monitor %s (%s)", created.id, created.name)
    return created


def update_monitor(client: Client, monitor: Monitor) -> None:
    """Send a previously retrieved monitor back to the server."""
    if monitor.id is None:
        raise ValueError("monitor has no id; create it first")
    client.do_json_request("PUT", f"/v1/monitor/{monitor.id}", monitor)


def get_monitor(client: Client, monitor_id: int) -> Monitor:
    data = client.do_json_request("GET", f"/v1/monitor/{monitor_id}")
    return Monitor.from_dict(data or {})


def get_monitors(client: Client) -> list[Monitor]:
    return _monitor_list(client.do_json_request("GET", "/v1/monitor"))


def get_monitors_by_name(client: Client, name: str) -> list[Monitor]:
    data = client.do_json_request("GET", "/v1/monitor", params={"name": name})
    return _monitor_list(data)


def get_monitors_by_tags(client: Client, tags: list[str]) -> list[Monitor]:
    data = client.do_json_request(
        "GET", "/v1/monitor", params={"monitor_tags": ",".join(tags)}
    )
    return _monitor_list(data)


def delete_monitor(client: Client, monitor_id: int) -> None:
    client.do_json_request("DELETE", f"/v1/monitor/{monitor_id}")
    logger.info("Deleted monitor %s", monitor_id)


def mute_monitors(client: Client) -> None:
    """Turn off notifications for every monitor."""
    client.do_json_request("POST", "/v1/monitor/mute_all")


def unmute_monitors(client: Client) -> None:
    """Turn notifications back on for every monitor."""
    client.do_json_request("POST", "/v1/monitor/unmute_all")


def mute_monitor(client: Client, monitor_id: int) -> None:
    client.do_json_request("POST", f"/v1/monitor/{monitor_id}/mute")


def unmute_monitor(client: Client, monitor_id: int) -> None:
    client.do_json_request("POST", f"/v1/monitor/{monitor_id}/unmute")

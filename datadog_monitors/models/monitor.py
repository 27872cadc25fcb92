"""Monitor dataclasses mirroring the Datadog monitor JSON schema."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from ..timeframe import decode_no_data_timeframe

Number = int | float


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    """Drop unset values so the payload only carries what was set."""
    return {key: value for key, value in data.items() if value is not None}


@dataclass
class ThresholdCount:
    """Threshold settings applicable to metric alerts."""

    ok: Number | None = None
    critical: Number | None = None
    warning: Number | None = None
    critical_recovery: Number | None = None
    warning_recovery: Number | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ThresholdCount:
        return cls(
            ok=data.get("ok"),
            critical=data.get("critical"),
            warning=data.get("warning"),
            critical_recovery=data.get("critical_recovery"),
            warning_recovery=data.get("warning_recovery"),
        )

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "ok": self.ok,
                "critical": self.critical,
                "warning": self.warning,
                "critical_recovery": self.critical_recovery,
                "warning_recovery": self.warning_recovery,
            }
        )


@dataclass
class Options:
    """Settings for a monitor.

    `no_data_timeframe` is in minutes; `0` means the no-data check is off
    and the field is left out of the payload.
    """

    no_data_timeframe: int = 0
    notify_audit: bool | None = None
    notify_no_data: bool | None = None
    renotify_interval: int | None = None
    new_host_delay: int | None = None
    evaluation_delay: int | None = None
    silenced: dict[str, int | None] = field(default_factory=dict)
    timeout_h: int | None = None
    escalation_message: str | None = None
    thresholds: ThresholdCount | None = None
    include_tags: bool | None = None
    require_full_window: bool | None = None
    locked: bool | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Options:
        thresholds = data.get("thresholds")
        return cls(
            no_data_timeframe=decode_no_data_timeframe(data.get("no_data_timeframe")),
            notify_audit=data.get("notify_audit"),
            notify_no_data=data.get("notify_no_data"),
            renotify_interval=data.get("renotify_interval"),
            new_host_delay=data.get("new_host_delay"),
            evaluation_delay=data.get("evaluation_delay"),
            silenced=dict(data.get("silenced") or {}),
            timeout_h=data.get("timeout_h"),
            escalation_message=data.get("escalation_message"),
            thresholds=ThresholdCount.from_dict(thresholds) if thresholds else None,
            include_tags=data.get("include_tags"),
            require_full_window=data.get("require_full_window"),
            locked=data.get("locked"),
        )

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "no_data_timeframe": self.no_data_timeframe or None,
                "notify_audit": self.notify_audit,
                "notify_no_data": self.notify_no_data,
                "renotify_interval": self.renotify_interval,
                "new_host_delay": self.new_host_delay,
                "evaluation_delay": self.evaluation_delay,
                "silenced": dict(self.silenced) if self.silenced else None,
                "timeout_h": self.timeout_h,
                "escalation_message": self.escalation_message,
                "thresholds": self.thresholds.to_dict() if self.thresholds else None,
                "include_tags": self.include_tags,
                "require_full_window": self.require_full_window,
                "locked": self.locked,
            }
        )


@dataclass
class Creator:
    """User that created a monitor."""

    email: str | None = None
    handle: str | None = None
    id: int | None = None
    name: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Creator:
        return cls(
            email=data.get("email"),
            handle=data.get("handle"),
            id=data.get("id"),
            name=data.get("name"),
        )

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {"email": self.email, "handle": self.handle, "id": self.id, "name": self.name}
        )


@dataclass
class Monitor:
    """A watched metric or check that notifies when a threshold is crossed."""

    creator: Creator | None = None
    id: int | None = None
    type: str | None = None
    query: str | None = None
    name: str | None = None
    message: str | None = None
    tags: list[str] = field(default_factory=list)
    options: Options | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Monitor:
        """Build a monitor from a decoded API payload.

        Raises:
            MalformedTimeframe: If `options.no_data_timeframe` is malformed.
        """
        creator = data.get("creator")
        options = data.get("options")
        return cls(
            creator=Creator.from_dict(creator) if creator else None,
            id=data.get("id"),
            type=data.get("type"),
            query=data.get("query"),
            name=data.get("name"),
            message=data.get("message"),
            tags=list(data.get("tags") or []),
            options=Options.from_dict(options) if options is not None else None,
        )

    @classmethod
    def from_json(cls, text: str | bytes) -> Monitor:
        return cls.from_dict(json.loads(text))

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "creator": self.creator.to_dict() if self.creator else None,
                "id": self.id,
                "type": self.type,
                "query": self.query,
                "name": self.name,
                "message": self.message,
                "tags": list(self.tags) if self.tags else None,
                "options": self.options.to_dict() if self.options else None,
            }
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Structured logging for modconf.

Records are emitted on the ``modconf`` logger hierarchy, one child logger per
:class:`LogComponent`, and may carry the fields listed in
:data:`STRUCTURED_FIELDS` through ``extra=``. Calling :func:`configure_logging`
is optional; hosts with their own logging setup simply receive the records.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Final

from modconf.compat import UTC, TypedDict, override
from modconf.core.model_types import LogComponent, LogFormat, ValueKind
from modconf.json import to_json_value

if TYPE_CHECKING:
    from collections.abc import Mapping

ROOT_LOGGER_NAME: Final[str] = "modconf"
LOG_FORMAT_ENV: Final[str] = "MODCONF_LOG_FORMAT"
LOG_LEVEL_ENV: Final[str] = "MODCONF_LOG_LEVEL"

_LEVELS_BY_NAME: Final[dict[str, int]] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}
LOG_LEVELS: Final[tuple[str, ...]] = tuple(_LEVELS_BY_NAME)
STRUCTURED_FIELDS: Final[tuple[str, ...]] = (
    "component",
    "config",
    "group",
    "entry",
    "kind",
    "path",
    "line_number",
    "details",
)
CHILD_LOGGERS: Final[tuple[str, ...]] = tuple(f"{ROOT_LOGGER_NAME}.{component}" for component in LogComponent)


@dataclass(slots=True, frozen=True)
class LogConfig:
    """Format and level applied by :func:`configure_logging`."""

    format: LogFormat
    level: int
    level_name: str


class JSONLogFormatter(logging.Formatter):
    """Render each record as one JSON object per line."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update({name: record.__dict__[name] for name in STRUCTURED_FIELDS if name in record.__dict__})
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(to_json_value(payload), ensure_ascii=False)


class TextLogFormatter(logging.Formatter):
    """Single-line ``[LEVEL] message`` formatter for consoles."""

    def __init__(self) -> None:
        super().__init__("[%(levelname)s] %(message)s")


def resolve_log_format(log_format: LogFormat | str | None) -> LogFormat:
    """Return the requested format, else ``MODCONF_LOG_FORMAT``, else text.

    Raises:
        ValueError: If the format name is unknown.
    """
    if log_format is None:
        log_format = os.getenv(LOG_FORMAT_ENV) or LogFormat.TEXT
    return log_format if isinstance(log_format, LogFormat) else LogFormat.from_str(log_format)


def resolve_log_level(log_level: str | int | None) -> tuple[int, str]:
    """Return ``(numeric level, level name)``.

    Falls back to ``MODCONF_LOG_LEVEL`` and then to ``info``; unknown names
    also resolve to ``info``.
    """
    if log_level is None:
        log_level = os.getenv(LOG_LEVEL_ENV) or "info"
    if isinstance(log_level, int):
        return log_level, logging.getLevelName(log_level).lower()
    name = log_level.strip().lower()
    if name not in _LEVELS_BY_NAME:
        name = "info"
    return _LEVELS_BY_NAME[name], name


def configure_logging(
    log_format: LogFormat | str | None = None,
    *,
    log_level: str | int | None = None,
) -> LogConfig:
    """Install a single stream handler on the ``modconf`` logger.

    Any handler installed by an earlier call is replaced, and records stop
    propagating to the root logger.

    Args:
        log_format: ``text`` or ``json``; ``None`` consults ``MODCONF_LOG_FORMAT``.
        log_level: Level name or number; ``None`` consults ``MODCONF_LOG_LEVEL``.

    Returns:
        The applied format and level.
    """
    selected_format = resolve_log_format(log_format)
    level, level_name = resolve_log_level(log_level)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONLogFormatter() if selected_format is LogFormat.JSON else TextLogFormatter())
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    root_logger.propagate = False
    for name in CHILD_LOGGERS:
        logging.getLogger(name).setLevel(level)
    return LogConfig(format=selected_format, level=level, level_name=level_name)


class _ComponentField(TypedDict):
    component: LogComponent


class StructuredLogExtra(_ComponentField, total=False):
    """Typed ``extra=`` payload for modconf log records."""

    config: str
    group: str
    entry: str
    kind: ValueKind
    path: str
    line_number: int
    details: dict[str, object]


def structured_extra(
    component: LogComponent,
    *,
    config: str | None = None,
    group: str | None = None,
    entry: str | None = None,
    kind: ValueKind | str | None = None,
    path: str | os.PathLike[str] | None = None,
    line_number: int | None = None,
    details: Mapping[str, object] | None = None,
) -> StructuredLogExtra:
    """Build an ``extra=`` payload, leaving out fields that were not given.

    Args:
        component: Component emitting the record.
        config: Config identifier.
        group: Group name.
        entry: Entry name.
        kind: Value kind, as a member or its name.
        path: File the record refers to.
        line_number: 1-based line in that file.
        details: Additional key/value context; omitted when empty.

    Returns:
        Payload for the ``extra`` argument of a logging call.
    """
    extra: StructuredLogExtra = {"component": component}
    if config is not None:
        extra["config"] = config
    if group is not None:
        extra["group"] = group
    if entry is not None:
        extra["entry"] = entry
    if kind is not None:
        extra["kind"] = kind if isinstance(kind, ValueKind) else ValueKind.from_str(kind)
    if path is not None:
        extra["path"] = os.fspath(path)
    if line_number is not None:
        extra["line_number"] = line_number
    if details:
        extra["details"] = dict(details)
    return extra


__all__ = [
    "CHILD_LOGGERS",
    "LOG_LEVELS",
    "STRUCTURED_FIELDS",
    "LogConfig",
    "StructuredLogExtra",
    "configure_logging",
    "resolve_log_format",
    "resolve_log_level",
    "structured_extra",
]

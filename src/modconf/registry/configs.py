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

"""One persisted config file and its groups.

File format, one file per config::

    <blank>
    <blank>
    # group description line
    [GroupName]
    <blank>
    # entry description line
    EntryName = <serialized value>

Saving always rewrites the whole file. Loading is tolerant: unknown sections,
unknown keys and malformed lines are skipped, and values that fail to parse
fall back to their defaults.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from modconf._internal.logging_utils import structured_extra
from modconf.compat import override
from modconf.core.model_types import LogComponent
from modconf.settings.constants import DEFAULT_ENCODING

from .groups import ConfigGroup, normalise_description

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from modconf._internal.logging_utils import StructuredLogExtra

COMMENT_MARKER: Final[str] = "#"
KEY_VALUE_SEPARATOR: Final[str] = "="

logger: logging.Logger = logging.getLogger("modconf.config")


class Config:
    """A named config persisted to a single key/value file.

    Groups keep their declaration order, which is also the order they are
    written in. Group names are unique within the config.
    """

    __slots__ = ("_encoding", "_groups", "_identifier", "_path")

    def __init__(self, identifier: str, path: Path, *, encoding: str = DEFAULT_ENCODING) -> None:
        """Create an empty config; use :meth:`Registry.register` instead.

        Args:
            identifier: Stable identifier of the config.
            path: File backing the config.
            encoding: Text encoding for reading and writing the file.
        """
        self._identifier = identifier
        self._path = path
        self._encoding = encoding
        self._groups: dict[str, ConfigGroup] = {}

    @property
    def identifier(self) -> str:
        """Stable identifier the config was registered under."""
        return self._identifier

    @property
    def path(self) -> Path:
        """File backing the config."""
        return self._path

    def group(self, name: str, *description: str) -> ConfigGroup:
        """Return the group called ``name``, declaring it on first use.

        A later call with the same name returns the existing group unchanged;
        its description is the one given on first declaration.

        Args:
            name: Section name.
            *description: Comment lines written above the section header.

        Returns:
            The group.
        """
        existing = self._groups.get(name)
        if existing is not None:
            return existing
        created = ConfigGroup(self, name, normalise_description(description))
        self._groups[name] = created
        return created

    def lookup_group(self, name: str) -> ConfigGroup | None:
        """Return the group called ``name``, or None."""
        return self._groups.get(name)

    def save(self) -> bool:
        """Rewrite the whole file from the in-memory values.

        The destination directory is created when missing. Write failures are
        logged and reported through the return value; in-memory values are
        left as they are.

        Returns:
            True when the file was written.
        """
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding=self._encoding) as writer:
                for name, group in self._groups.items():
                    writer.write("\n\n")
                    for line in group.description:
                        writer.write(f"{COMMENT_MARKER} {line}\n")
                    writer.write(f"[{name}]\n")
                    group.save(writer)
        except (OSError, UnicodeError):
            logger.exception(
                "Failed to save config file '%s'",
                self._path,
                extra=self._log_extra(),
            )
            return False
        logger.debug("Saved config file '%s'", self._path, extra=self._log_extra())
        return True

    def load(self) -> bool:
        """Populate entry values from the file.

        A missing file is not an error: every entry keeps its current value.
        Parsing never stops early; lines that cannot be used are skipped.

        Returns:
            True when a file was read.
        """
        if not self._path.exists():
            logger.debug("No config file at '%s'; using defaults", self._path, extra=self._log_extra())
            return False
        try:
            with self._path.open(encoding=self._read_encoding(), errors="replace") as reader:
                lines = reader.readlines()
        except OSError:
            logger.exception("Failed to read config file '%s'", self._path, extra=self._log_extra())
            return False

        logger.info(
            "Loading %d lines from config file '%s'",
            len(lines),
            self._path,
            extra=self._log_extra(),
        )
        group: ConfigGroup | None = None
        for line_number, line in enumerate(lines, start=1):
            trimmed = line.strip()
            if not trimmed or trimmed.startswith(COMMENT_MARKER):
                continue

            if trimmed.startswith("["):
                if trimmed.endswith("]"):
                    group = self._enter_group(trimmed[1:-1], line_number)
                continue

            if group is None:
                continue

            key, separator, value = trimmed.partition(KEY_VALUE_SEPARATOR)
            if not separator:
                continue
            item = group.try_get_entry(key.strip())
            if item is not None:
                item.load(value.strip())
        return True

    def _enter_group(self, name: str, line_number: int) -> ConfigGroup | None:
        group = self._groups.get(name)
        if group is None:
            logger.warning(
                "Group '%s' not found in config file '%s'",
                name,
                self._path,
                extra=self._log_extra(group=name, line_number=line_number),
            )
        return group

    def _read_encoding(self) -> str:
        # Accept a byte order mark written by other tools.
        return "utf-8-sig" if self._encoding == "utf-8" else self._encoding

    def _log_extra(self, *, group: str | None = None, line_number: int | None = None) -> StructuredLogExtra:
        extra = structured_extra(component=LogComponent.CONFIG, config=self._identifier, path=self._path)
        if group is not None:
            extra["group"] = group
        if line_number is not None:
            extra["line_number"] = line_number
        return extra

    def __iter__(self) -> Iterator[ConfigGroup]:
        return iter(self._groups.values())

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, name: object) -> bool:
        return name in self._groups

    @override
    def __repr__(self) -> str:
        return f"Config({self._identifier!r}, path={str(self._path)!r})"


__all__ = ["COMMENT_MARKER", "KEY_VALUE_SEPARATOR", "Config"]

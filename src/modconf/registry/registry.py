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

"""Registry mapping stable identifiers to configs.

A host application creates one :class:`Registry` and hands it to every module
that declares or reads settings. Identifiers are unique for the lifetime of
the registry and configs are never removed.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeVar, overload

from modconf._internal.exceptions import DuplicateIdentifierError
from modconf._internal.logging_utils import structured_extra
from modconf.core.model_types import LogComponent
from modconf.paths import config_file_path
from modconf.settings.models import RegistrySettings

from .configs import Config

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping
    from pathlib import Path

    from .entries import ConfigEntry
    from .groups import ConfigGroup

T = TypeVar("T")

logger: logging.Logger = logging.getLogger("modconf.registry")


class Registry:
    """Process-level mapping from identifier to :class:`Config`."""

    __slots__ = ("_configs", "_cwd", "_settings")

    def __init__(self, settings: RegistrySettings | None = None, *, cwd: Path | None = None) -> None:
        """Create an empty registry.

        Args:
            settings: Where and how config files are stored; defaults apply when omitted.
            cwd: Base for a relative settings directory; defaults to the
                working directory at registration time.
        """
        self._settings = settings or RegistrySettings()
        self._cwd = cwd
        self._configs: dict[str, Config] = {}

    @property
    def settings(self) -> RegistrySettings:
        """Settings used to derive config file paths."""
        return self._settings

    @property
    def configs(self) -> Mapping[str, Config]:
        """Read-only view of all registered configs by identifier."""
        return MappingProxyType(self._configs)

    def register(self, identifier: str) -> Config:
        """Create and store an empty config for ``identifier``.

        Args:
            identifier: Stable identifier; also names the backing file.

        Returns:
            The new config.

        Raises:
            DuplicateIdentifierError: If ``identifier`` is already registered.
        """
        if identifier in self._configs:
            raise DuplicateIdentifierError(identifier)
        path = config_file_path(identifier, self._settings, cwd=self._cwd)
        config = Config(identifier, path, encoding=self._settings.encoding)
        self._configs[identifier] = config
        logger.debug(
            "Registered config '%s' at '%s'",
            identifier,
            path,
            extra=structured_extra(component=LogComponent.REGISTRY, config=identifier, path=path),
        )
        return config

    @overload
    def lookup(self, identifier: str) -> Config | None: ...

    @overload
    def lookup(self, identifier: str, group_name: str) -> ConfigGroup | None: ...

    @overload
    def lookup(self, identifier: str, group_name: str, entry_name: str) -> ConfigEntry[Any] | None: ...

    def lookup(
        self,
        identifier: str,
        group_name: str | None = None,
        entry_name: str | None = None,
    ) -> Config | ConfigGroup | ConfigEntry[Any] | None:
        """Resolve a config, a group, or an entry; None as soon as a step misses.

        Args:
            identifier: Config identifier.
            group_name: Optional group within the config.
            entry_name: Optional entry within the group.

        Returns:
            The most specific object requested, or None.
        """
        config = self._configs.get(identifier)
        if config is None or group_name is None:
            return config
        group = config.lookup_group(group_name)
        if group is None or entry_name is None:
            return group
        return group.try_get_entry(entry_name)

    def get_or_default(
        self,
        identifier: str,
        group_name: str,
        entry_name: str,
        fallback: T,
        value_type: type[T] | None = None,
    ) -> T:
        """Read an entry's value, returning ``fallback`` on any failure.

        Args:
            identifier: Config identifier.
            group_name: Group within the config.
            entry_name: Entry within the group.
            fallback: Value returned when the entry is missing or has another type.
            value_type: Expected value type; defaults to ``type(fallback)``.

        Returns:
            The entry's value or ``fallback``.
        """
        try:
            entry = self.lookup(identifier, group_name, entry_name)
            if entry is not None:
                expected: type[T] = value_type if value_type is not None else type(fallback)
                return entry.get_as(expected)
        # ignore JUSTIFIED: this read is documented to never raise; every failure
        # yields the caller's fallback
        except Exception:  # noqa: BLE001
            logger.debug(
                "Falling back for '%s/%s.%s'",
                identifier,
                group_name,
                entry_name,
                extra=structured_extra(
                    component=LogComponent.REGISTRY,
                    config=identifier,
                    group=group_name,
                    entry=entry_name,
                ),
            )
        return fallback

    def __iter__(self) -> Iterator[Config]:
        return iter(self._configs.values())

    def __len__(self) -> int:
        return len(self._configs)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._configs


__all__ = ["Registry"]

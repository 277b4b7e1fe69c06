"""Settings parser use case for AnyDesk."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml

from anydesk_cli.domain.binary import Platform
from anydesk_cli.domain.exceptions import AnyDeskConfigError
from anydesk_cli.domain.settings import AnyDeskSettings


class SettingsParser:
    """Parses YAML configuration into AnyDeskSettings.

    Expected layout (every key optional)::

        binary:
          name: anydesk
          path: /opt/anydesk/anydesk
          search_dirs:
            - /opt/anydesk

    Missing keys fall back to the platform defaults from
    AnyDeskSettings.for_platform(). A configured search_dirs list replaces
    the platform install directories.
    """

    def __init__(
        self,
        platform: Platform,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the parser.

        Args:
            platform: Platform whose defaults fill in missing keys.
            environ: Environment used for platform defaults.
        """
        self._platform = platform
        self._environ = environ

    def parse(self, yaml_str: str) -> AnyDeskSettings:
        """Parse YAML config to settings.

        Args:
            yaml_str: YAML document.

        Returns:
            AnyDeskSettings domain object.

        Raises:
            AnyDeskConfigError: If YAML is invalid or a field has the wrong type.
        """
        try:
            config = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise AnyDeskConfigError(f"Invalid YAML: {e}") from e

        if config is None:
            config = {}

        if not isinstance(config, dict):
            raise AnyDeskConfigError("Config must be a dictionary")

        binary = config.get("binary") or {}
        if not isinstance(binary, dict):
            raise AnyDeskConfigError("binary section must be a dictionary")

        defaults = AnyDeskSettings.for_platform(self._platform, self._environ)

        name = self._optional_str(binary, "name") or defaults.binary_name
        path = self._optional_str(binary, "path")
        search_dirs = defaults.search_dirs
        if "search_dirs" in binary:
            raw_dirs = binary["search_dirs"]
            if not isinstance(raw_dirs, list):
                raise AnyDeskConfigError("binary.search_dirs must be a list")
            search_dirs = tuple(str(entry) for entry in raw_dirs)

        return AnyDeskSettings(
            binary_name=name,
            search_dirs=search_dirs,
            binary_path=path,
        )

    def parse_file(self, path: Path) -> AnyDeskSettings:
        """Read and parse a YAML settings file.

        Raises:
            AnyDeskConfigError: If the file cannot be read or is invalid.
        """
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise AnyDeskConfigError(f"Cannot read settings file {path}: {e}") from e
        return self.parse(content)

    @staticmethod
    def _optional_str(section: dict[str, Any], key: str) -> str | None:
        value = section.get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise AnyDeskConfigError(f"binary.{key} must be a string, got: {value!r}")
        return value

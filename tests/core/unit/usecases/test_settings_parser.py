"""Unit tests for SettingsParser use case."""

from __future__ import annotations

from pathlib import Path

import pytest

from anydesk_cli.domain.binary import Platform
from anydesk_cli.domain.exceptions import AnyDeskConfigError
from anydesk_cli.usecases.settings_parser import SettingsParser

LINUX = Platform(os="linux")
WINDOWS = Platform(os="windows")


@pytest.mark.unit
@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.SettingsParser")
class TestSettingsParser:
    """Test YAML settings parsing."""

    def test_empty_document_uses_platform_defaults(self) -> None:
        """An empty document yields the platform defaults."""
        settings = SettingsParser(LINUX, environ={}).parse("")
        assert settings.binary_name == "anydesk"
        assert settings.search_dirs == ()
        assert settings.binary_path is None

    def test_windows_defaults(self) -> None:
        """Windows defaults include the .exe suffix and program files directory."""
        settings = SettingsParser(
            WINDOWS, environ={"PROGRAMFILES(X86)": "C:\\Program Files (x86)"}
        ).parse("binary: {}\n")
        assert settings.binary_name == "anydesk.exe"
        assert settings.search_dirs == ("C:\\Program Files (x86)\\AnyDesk",)

    def test_full_document(self) -> None:
        """All keys are applied."""
        yaml_str = (
            "binary:\n"
            "  name: anydesk-beta\n"
            "  path: /opt/anydesk/anydesk\n"
            "  search_dirs:\n"
            "    - /opt/anydesk\n"
            "    - /usr/local/anydesk\n"
        )
        settings = SettingsParser(LINUX, environ={}).parse(yaml_str)
        assert settings.binary_name == "anydesk-beta"
        assert settings.binary_path == "/opt/anydesk/anydesk"
        assert settings.search_dirs == ("/opt/anydesk", "/usr/local/anydesk")

    def test_search_dirs_replace_platform_defaults(self) -> None:
        """A configured search_dirs list replaces the platform directories."""
        settings = SettingsParser(WINDOWS, environ={}).parse(
            "binary:\n  search_dirs: []\n"
        )
        assert settings.search_dirs == ()

    def test_invalid_yaml(self) -> None:
        """Malformed YAML raises AnyDeskConfigError."""
        with pytest.raises(AnyDeskConfigError, match="Invalid YAML"):
            SettingsParser(LINUX).parse("binary: [unclosed")

    def test_non_mapping_document(self) -> None:
        """The document must be a mapping."""
        with pytest.raises(AnyDeskConfigError, match="must be a dictionary"):
            SettingsParser(LINUX).parse("- a\n- b\n")

    def test_non_mapping_binary_section(self) -> None:
        """The binary section must be a mapping."""
        with pytest.raises(AnyDeskConfigError, match="binary section"):
            SettingsParser(LINUX).parse("binary: anydesk\n")

    def test_non_list_search_dirs(self) -> None:
        """search_dirs must be a list."""
        with pytest.raises(AnyDeskConfigError, match="search_dirs must be a list"):
            SettingsParser(LINUX).parse("binary:\n  search_dirs: /opt\n")

    def test_non_string_path(self) -> None:
        """path must be a string."""
        with pytest.raises(AnyDeskConfigError, match="binary.path must be a string"):
            SettingsParser(LINUX).parse("binary:\n  path: 42\n")

    def test_invalid_name_rejected_by_settings(self) -> None:
        """Settings validation still applies to parsed values."""
        with pytest.raises(AnyDeskConfigError, match="must be a file name"):
            SettingsParser(LINUX).parse("binary:\n  name: bin/anydesk\n")

    def test_parse_file(self, tmp_path: Path) -> None:
        """parse_file reads a settings file."""
        config = tmp_path / "anydesk.yml"
        config.write_text("binary:\n  path: /srv/anydesk\n", encoding="utf-8")

        settings = SettingsParser(LINUX, environ={}).parse_file(config)

        assert settings.binary_path == "/srv/anydesk"

    def test_parse_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises AnyDeskConfigError."""
        with pytest.raises(AnyDeskConfigError, match="Cannot read settings file"):
            SettingsParser(LINUX).parse_file(tmp_path / "missing.yml")

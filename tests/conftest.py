"""Shared fixtures"""

from __future__ import annotations

import pytest

from linecmp.services.config_manager import ConfigManager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path):
    """Point the ConfigManager singleton at a throwaway file"""
    manager = ConfigManager(tmp_path / "config" / "config.json")
    ConfigManager.set_instance(manager)
    yield manager
    ConfigManager.set_instance(None)


@pytest.fixture
def write_file(tmp_path):
    """Write lines (newline-terminated) to a file and return its path"""

    def _write(name: str, lines: list[str]) -> str:
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return str(path)

    return _write

"""Shared fixtures: an in-memory stand-in for the macOS primitives."""

from __future__ import annotations

from typing import Dict, List, Optional, Set, Tuple

import pytest

from computer_naming.config import Settings
from computer_naming.logs import configure_logging


class FakePlatform:
    def __init__(self, serial: str = "C02AB123CD4E", admin: bool = True,
                 fail_on: Optional[Set[str]] = None, readback: Optional[str] = None) -> None:
        self.serial = serial
        self.admin = admin
        self.fail_on = fail_on or set()
        self.readback = readback
        self.settings: Dict[str, str] = {}
        self.calls: List[Tuple[str, ...]] = []

    def read_serial(self) -> str:
        self.calls.append(("read_serial",))
        return self.serial

    def get_setting(self, name: str) -> str:
        self.calls.append(("get_setting", name))
        if self.readback is not None:
            return self.readback
        return self.settings.get(name, "")

    def set_setting(self, name: str, value: str) -> bool:
        self.calls.append(("set_setting", name, value))
        if name in self.fail_on:
            return False
        self.settings[name] = value
        return True

    def current_user_is_admin(self) -> bool:
        self.calls.append(("current_user_is_admin",))
        return self.admin


@pytest.fixture
def log_file(tmp_path):
    return tmp_path / "logs" / "computer_naming.log"


@pytest.fixture
def settings(log_file, tmp_path):
    return Settings(log_file=log_file, backup_file=tmp_path / "computer_name.backup")


@pytest.fixture
def logger(log_file):
    return configure_logging(log_file)

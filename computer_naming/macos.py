"""
macOS primitives the naming run depends on.

Everything that touches the host lives here so the pipeline in `cli` can be
driven by a fake in tests:
- serial number: `ioreg -l`, key IOPlatformSerialNumber
- naming settings: `scutil --get/--set HostName|ComputerName|LocalHostName`
- privilege: effective uid
"""

from __future__ import annotations

import os
import re
import subprocess
from typing import List

SERIAL_KEY = "IOPlatformSerialNumber"
QUOTED_RE = re.compile(r'.*"(.*)"')


def parse_serial(ioreg_output: str) -> str:
    """
    Pull the serial out of `ioreg -l` output.

    The value is the last quoted string on the line carrying the key:
      |   "IOPlatformSerialNumber" = "C02AB123CD4E"
    Returns "" when the key is absent.
    """
    for line in ioreg_output.splitlines():
        if SERIAL_KEY not in line:
            continue
        m = QUOTED_RE.match(line)
        if m:
            return m.group(1).strip()
    return ""


class MacPlatform:
    def __init__(self, ioreg: str = "ioreg", scutil: str = "scutil") -> None:
        self.ioreg = ioreg
        self.scutil = scutil

    def _run(self, cmd: List[str]) -> subprocess.CompletedProcess:
        return subprocess.run(cmd, capture_output=True, text=True, encoding="utf-8", errors="replace", check=False)

    def read_serial(self) -> str:
        try:
            proc = self._run([self.ioreg, "-l"])
        except OSError:
            return ""
        return parse_serial(proc.stdout)

    def get_setting(self, name: str) -> str:
        try:
            proc = self._run([self.scutil, "--get", name])
        except OSError:
            return ""
        return proc.stdout.strip()

    def set_setting(self, name: str, value: str) -> bool:
        try:
            proc = self._run([self.scutil, "--set", name, value])
        except OSError:
            return False
        return proc.returncode == 0

    def current_user_is_admin(self) -> bool:
        return os.geteuid() == 0

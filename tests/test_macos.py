import subprocess

import pytest

from computer_naming.macos import MacPlatform, parse_serial

IOREG_SAMPLE = """\
+-o Root  <class IORegistryEntry, id 0x100000100, retain 20>
  +-o J314sAP  <class IOPlatformExpertDevice, id 0x100000116, registered, matched, active, busy 0 (2 ms), retain 36>
    | {
    |   "IOPlatformUUID" = "5E0D7E2A-0000-0000-0000-4C2B9A1F1D3E"
    |   "IOPlatformSerialNumber" = "FVFXJ2ABC1XY"
    |   "model" = <"MacBookPro18,3">
    | }
"""


def completed(cmd, returncode=0, stdout=""):
    return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr="")


class TestParseSerial:
    def test_extracts_value(self):
        assert parse_serial(IOREG_SAMPLE) == "FVFXJ2ABC1XY"

    def test_missing_key(self):
        assert parse_serial('    |   "IOPlatformUUID" = "5E0D7E2A"\n') == ""

    def test_empty_output(self):
        assert parse_serial("") == ""


class TestMacPlatform:
    def test_read_serial_runs_ioreg(self, monkeypatch):
        seen = []

        def fake_run(cmd, **kwargs):
            seen.append(cmd)
            return completed(cmd, stdout=IOREG_SAMPLE)

        monkeypatch.setattr(subprocess, "run", fake_run)
        assert MacPlatform().read_serial() == "FVFXJ2ABC1XY"
        assert seen == [["ioreg", "-l"]]

    def test_read_serial_without_ioreg(self, monkeypatch):
        def missing(cmd, **kwargs):
            raise FileNotFoundError(cmd[0])

        monkeypatch.setattr(subprocess, "run", missing)
        assert MacPlatform().read_serial() == ""

    def test_get_setting_strips_newline(self, monkeypatch):
        monkeypatch.setattr(subprocess, "run", lambda cmd, **kw: completed(cmd, stdout="Mac-AB123-CD4E\n"))
        assert MacPlatform().get_setting("HostName") == "Mac-AB123-CD4E"

    @pytest.mark.parametrize("returncode, expected", [(0, True), (1, False)])
    def test_set_setting_reports_exit_status(self, monkeypatch, returncode, expected):
        seen = []

        def fake_run(cmd, **kwargs):
            seen.append(cmd)
            return completed(cmd, returncode=returncode)

        monkeypatch.setattr(subprocess, "run", fake_run)
        assert MacPlatform().set_setting("LocalHostName", "Mac-AB123-CD4E") is expected
        assert seen == [["scutil", "--set", "LocalHostName", "Mac-AB123-CD4E"]]

    def test_read_serial_survives_undecodable_bytes(self, monkeypatch):
        raw = b"\xff\n|   \"IOPlatformSerialNumber\" = \"C02AB123CD4E\"\n"

        def fake_run(cmd, **kwargs):
            # decode the way subprocess would with the caller's text settings
            return completed(cmd, stdout=raw.decode(kwargs.get("encoding") or "utf-8", kwargs.get("errors") or "strict"))

        monkeypatch.setattr(subprocess, "run", fake_run)
        assert MacPlatform().read_serial() == "C02AB123CD4E"

    def test_set_setting_without_scutil(self, monkeypatch):
        def missing(cmd, **kwargs):
            raise FileNotFoundError(cmd[0])

        monkeypatch.setattr(subprocess, "run", missing)
        assert MacPlatform().set_setting("HostName", "x") is False

    @pytest.mark.parametrize("euid, expected", [(0, True), (501, False)])
    def test_admin_is_root(self, monkeypatch, euid, expected):
        monkeypatch.setattr("computer_naming.macos.os.geteuid", lambda: euid, raising=False)
        assert MacPlatform().current_user_is_admin() is expected

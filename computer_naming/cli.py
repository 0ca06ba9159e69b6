"""
Set HostName, ComputerName and LocalHostName from the hardware serial number.

Usage:
  sudo python tools/set_computer_name.py -p Mac -c Eika
  sudo python tools/set_computer_name.py -d            # dry run, nothing is changed

Under Jamf the prefix, customer and dry-run flag come from script parameters
4, 5 and 6 instead (see `config`).

Steps: root check -> serial -> name -> validate -> apply (x3) -> verify.
Any failure is logged as "ERROR: ..." and the process exits 1; settings
already written before the failure stay written.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import List, Optional, Protocol

from .config import NamingConfig, Settings, load_settings, resolve_config, usage
from .errors import (
    ApplyError,
    DataUnavailableError,
    NamingError,
    NotAdministratorError,
    UsageError,
    VerificationMismatchError,
)
from .logs import configure_logging, get_logger
from .macos import MacPlatform
from .naming import generate_name, validate_name

# Written in this order; no rollback if a later one fails.
NAME_SETTINGS = ("HostName", "ComputerName", "LocalHostName")
VERIFY_SETTING = "HostName"


class Platform(Protocol):
    def read_serial(self) -> str: ...
    def get_setting(self, name: str) -> str: ...
    def set_setting(self, name: str, value: str) -> bool: ...
    def current_user_is_admin(self) -> bool: ...


@dataclass
class ApplyResult:
    setting: str
    value: str
    status: str  # applied | dry_run


def require_admin(platform: Platform) -> None:
    if not platform.current_user_is_admin():
        raise NotAdministratorError("This script must be run as root")


def read_serial(platform: Platform) -> str:
    log = get_logger()
    log.info("Retrieving serial number...")
    serial = platform.read_serial()
    if not serial:
        raise DataUnavailableError("Could not retrieve serial number")
    log.info("Retrieved serial number: %s", serial)
    return serial


def apply_name(platform: Platform, setting: str, value: str, dry_run: bool) -> ApplyResult:
    log = get_logger()
    if dry_run:
        log.info("Would set %s to %s (dry run)", setting, value)
        return ApplyResult(setting=setting, value=value, status="dry_run")

    if not platform.set_setting(setting, value):
        raise ApplyError(f"Failed to set {setting} to {value}")
    log.info("Successfully set %s to %s", setting, value)
    return ApplyResult(setting=setting, value=value, status="applied")


def apply_all(platform: Platform, name: str, dry_run: bool) -> List[ApplyResult]:
    get_logger().info("Setting computer names...")
    return [apply_name(platform, setting, name, dry_run) for setting in NAME_SETTINGS]


def verify_name(platform: Platform, name: str) -> None:
    log = get_logger()
    log.info("Verifying changes...")
    if platform.get_setting(VERIFY_SETTING) != name:
        raise VerificationMismatchError("Verification failed - hostname does not match")
    log.info("Computer naming process completed successfully!")


def run(config: NamingConfig, platform: Platform) -> str:
    """Run the whole naming pass and return the name that was (or would be) set."""
    require_admin(platform)

    serial = read_serial(platform)
    name = generate_name(serial, config.prefix, config.max_name_length)
    validate_name(name, config.max_name_length)
    get_logger().info("Generated computer name: %s", name)

    results = apply_all(platform, name, config.dry_run)
    get_logger().info(
        "Applied=%d, DryRun=%d",
        sum(1 for r in results if r.status == "applied"),
        sum(1 for r in results if r.status == "dry_run"),
    )

    if not config.dry_run:
        verify_name(platform, name)
    return name


def main(argv: Optional[List[str]] = None,
         platform: Optional[Platform] = None,
         settings: Optional[Settings] = None) -> int:
    argv = list(sys.argv if argv is None else argv)
    prog = argv[0] if argv else "set_computer_name"

    try:
        config = resolve_config(argv)
    except UsageError:
        print(usage(prog))
        return 1

    settings = settings or load_settings()
    log = configure_logging(settings.log_file)
    log.info("Customer: %s, prefix: %s, dry run: %s", config.customer, config.prefix, config.dry_run)

    try:
        run(config, platform or MacPlatform())
    except NamingError as e:
        log.error("ERROR: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""
Run configuration: naming parameters from argv, file paths from the environment.

Jamf runs policy scripts as:
  <script> <mount point> <computer name> <user name> $4 $5 $6 ...

Parameters used here:
  $4  client prefix       (empty = default)
  $5  customer name       (empty = default)
  $6  "true" for dry run

Run manually:
  sudo python tools/set_computer_name.py [-d] [-p PREFIX] [-c CUSTOMER]

Flags follow `getopts "dp:c:h"` except that an option value may not itself
look like a flag: `-p -d` is a usage error, not the prefix "-d". Operands
after the flags are accepted and ignored.
"""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from .errors import UsageError

DEFAULT_CUSTOMER = "Eika"
DEFAULT_PREFIX = "Mac"
DEFAULT_MAX_NAME_LENGTH = 15

DEFAULT_LOG_FILE = Path("/var/log/tie_computer_naming.log")
DEFAULT_BACKUP_FILE = Path("/var/log/tie_computer_name.backup")

JAMF_BINARIES = {"/usr/local/jamf/bin/jamf", "/usr/local/bin/jamf"}

# argv indices of the Jamf script parameters
JAMF_PREFIX_ARG = 4
JAMF_CUSTOMER_ARG = 5
JAMF_DRY_RUN_ARG = 6


@dataclass(frozen=True)
class NamingConfig:
    customer: str = DEFAULT_CUSTOMER
    prefix: str = DEFAULT_PREFIX
    max_name_length: int = DEFAULT_MAX_NAME_LENGTH
    dry_run: bool = False

    def __post_init__(self) -> None:
        if not self.prefix:
            raise UsageError("Client prefix must not be empty")
        if self.max_name_length <= 0:
            raise UsageError(f"Maximum name length must be positive, got {self.max_name_length}")


@dataclass(frozen=True)
class Settings:
    log_file: Path = DEFAULT_LOG_FILE
    backup_file: Path = DEFAULT_BACKUP_FILE  # reserved, nothing writes it yet


def load_settings() -> Settings:
    return Settings(
        log_file=Path(os.environ.get("COMPUTER_NAMING_LOG_FILE", DEFAULT_LOG_FILE)),
        backup_file=Path(os.environ.get("COMPUTER_NAMING_BACKUP_FILE", DEFAULT_BACKUP_FILE)),
    )


def usage(prog: str) -> str:
    return "\n".join([
        f"Usage: {prog} [-d] [-p PREFIX] [-c CUSTOMER]",
        "  -d: Dry run - show what would be done without making changes",
        f"  -p: Set client prefix (default: {DEFAULT_PREFIX})",
        f"  -c: Set customer name (default: {DEFAULT_CUSTOMER})",
    ])


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def build_parser(prog: str) -> argparse.ArgumentParser:
    ap = _Parser(prog=prog, add_help=False, allow_abbrev=False)
    ap.add_argument("-d", dest="dry_run", action="store_true")
    ap.add_argument("-p", dest="prefix", default=DEFAULT_PREFIX)
    ap.add_argument("-c", dest="customer", default=DEFAULT_CUSTOMER)
    ap.add_argument("-h", dest="help", action="store_true")
    ap.add_argument("operands", nargs="*")  # ignored, as getopts leaves them
    return ap


def is_jamf_invocation(argv: Sequence[str]) -> bool:
    return bool(argv) and argv[0] in JAMF_BINARIES


def _jamf_param(argv: Sequence[str], index: int) -> str:
    return argv[index] if len(argv) > index else ""


def from_jamf(argv: Sequence[str]) -> NamingConfig:
    prefix = _jamf_param(argv, JAMF_PREFIX_ARG)
    customer = _jamf_param(argv, JAMF_CUSTOMER_ARG)
    return NamingConfig(
        customer=customer or DEFAULT_CUSTOMER,
        prefix=prefix or DEFAULT_PREFIX,
        dry_run=_jamf_param(argv, JAMF_DRY_RUN_ARG) == "true",
    )


def from_flags(argv: Sequence[str]) -> NamingConfig:
    args = build_parser(argv[0] if argv else "set_computer_name").parse_args(list(argv[1:]))
    if args.help:
        raise UsageError("help requested")
    return NamingConfig(customer=args.customer, prefix=args.prefix, dry_run=args.dry_run)


def resolve_config(argv: List[str]) -> NamingConfig:
    """Pick the Jamf or the manual parameter convention based on argv[0]."""
    if is_jamf_invocation(argv):
        return from_jamf(argv)
    return from_flags(argv)

#!/usr/bin/env python3
"""
Name this Mac from its serial number (entry point for Jamf policies and manual runs).

Usage:
  sudo python tools/set_computer_name.py [-d] [-p PREFIX] [-c CUSTOMER]
  sudo python -m computer_naming.cli [-d] [-p PREFIX] [-c CUSTOMER]

The `computer_naming` package must be importable by the interpreter root
runs: `pip install .` from the repo root, or use the `-m` form from the
repo root. The script does not add the checkout to sys.path.

Exit codes:
  0 = names set and verified (or dry run finished)
  1 = usage shown, or the run stopped on an error (see the log file)
"""

from __future__ import annotations

from computer_naming.cli import main

if __name__ == "__main__":
    raise SystemExit(main())

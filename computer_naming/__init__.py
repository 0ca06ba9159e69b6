"""Name Macs consistently from their hardware serial number."""

__version__ = "2.0.0"

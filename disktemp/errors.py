"""
Error Types

Only EnumerationError is fatal to a run. The others are caught one level up:
UnusableOutput by the prober (next hint), ProbeFailed by the scanner (failed row).
"""


class DiskTempError(Exception):
    """Base error for the disk temperature tool."""


class EnumerationError(DiskTempError):
    """lsblk is missing or failed, so there is nothing to probe."""


class UnusableOutput(DiskTempError):
    """smartctl output was neither a JSON object nor text with a temperature."""


class ProbeFailed(DiskTempError):
    """Every device-type hint was tried for a device and none gave usable output."""

    def __init__(self, device: str) -> None:
        super().__init__(f"Failed for device: {device} (all device-type hints exhausted)")
        self.device = device

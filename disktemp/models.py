"""
Data Models

Value types passed between the lister, prober, scanner and reporter.
"""
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

from .config import UNKNOWN_VENDOR, UNKNOWN_MODEL


class DiskInfo(NamedTuple):
    """Vendor, model and temperature recovered from one smartctl run"""
    vendor: str
    model: str
    temperature: Optional[int]


class ProbeAttempt(NamedTuple):
    """
    One smartctl invocation.

    returncode is None when the process could not be started or timed out.
    """
    device: str
    hint: Optional[str]
    stdout: bytes
    stderr: bytes
    returncode: Optional[int]


class ProbeStatus(Enum):
    OK = 'OK'
    FAILED = 'FAIL'


@dataclass(frozen=True)
class DeviceRecord:
    path: str
    vendor: str = UNKNOWN_VENDOR
    model: str = UNKNOWN_MODEL
    temperature: Optional[int] = None
    status: ProbeStatus = ProbeStatus.OK
    message: str = ''

    @classmethod
    def ok(cls, path: str, info: DiskInfo) -> 'DeviceRecord':
        return cls(path=path, vendor=info.vendor, model=info.model,
                   temperature=info.temperature)

    @classmethod
    def failed(cls, path: str, message: str) -> 'DeviceRecord':
        return cls(path=path, status=ProbeStatus.FAILED, message=message)

    @property
    def is_ok(self) -> bool:
        return self.status is ProbeStatus.OK

"""
Disk Temperature Package

Reports vendor, model and temperature for every physical disk using lsblk
and smartctl.
"""

from . import config
from . import drives
from . import runner
from . import extractor
from . import prober
from . import scanner
from . import report

# Re-export commonly used items
from .config import DEFAULT_CONFIG, get_config, UNKNOWN_VENDOR, UNKNOWN_MODEL
from .errors import DiskTempError, EnumerationError, UnusableOutput, ProbeFailed
from .models import DiskInfo, ProbeAttempt, DeviceRecord, ProbeStatus
from .drives import list_disk_devices, parse_lsblk_output
from .runner import run_smartctl, build_smartctl_args
from .extractor import extract
from .prober import probe_device, trace_device
from .scanner import scan_devices
from .report import format_table, print_report

"""
Command Line Entry Point

Lists all disks, probes them in parallel and prints the table.
Exit status is non-zero only when not run as root or when lsblk fails.
"""
import logging
import os
import sys

from . import config
from .drives import list_disk_devices
from .errors import EnumerationError
from .prober import probe_device
from .report import print_report
from .runner import run_smartctl
from .scanner import scan_devices

logger = logging.getLogger('DiskTemp')


def setup_logging(level=None):
    """Log to stderr so the table on stdout stays clean"""
    if level is None:
        level = config.DEFAULT_CONFIG['log_level']
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def is_root() -> bool:
    return os.geteuid() == 0


def main(cfg=None) -> int:
    cfg = cfg or config.get_config()
    setup_logging(cfg['log_level'])

    if not is_root():
        print("Must be run as root.", file=sys.stderr)
        return 1

    try:
        devices = list_disk_devices(cfg['excluded_prefixes'], cfg['lsblk_timeout'])
    except EnumerationError as e:
        logger.error(f"Device enumeration failed: {e}")
        print(f"Failed to get devices: {e}", file=sys.stderr)
        return 1

    hints = cfg['device_type_hints']
    timeout = cfg['smartctl_timeout']

    def probe(device):
        return probe_device(device, lambda dev, hint: run_smartctl(dev, hint, timeout), hints)

    records = scan_devices(devices, probe, cfg['max_workers'])
    print_report(records)
    return 0

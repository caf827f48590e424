"""
Drive Listing Module

Enumerates physical disks with lsblk.
"""
import logging
import subprocess
from typing import Iterable, List, Optional

from . import config
from .errors import EnumerationError

logger = logging.getLogger('DiskTemp.drives')


def parse_lsblk_output(output: str, excluded_prefixes: Optional[Iterable[str]] = None) -> List[str]:
    """
    Turn `lsblk -d -o NAME,TYPE -n -l` output into device paths.

    Only rows of type "disk" are kept, and paths starting with one of
    excluded_prefixes are dropped.
    """
    if excluded_prefixes is None:
        excluded_prefixes = config.DEFAULT_CONFIG['excluded_prefixes']
    excluded = tuple(excluded_prefixes)

    devices = []
    for line in output.splitlines():
        parts = line.split()
        if len(parts) < 2:
            continue

        name = parts[0]
        dev_type = parts[1]
        if dev_type != 'disk':
            continue

        device_path = f'/dev/{name}'
        if excluded and device_path.startswith(excluded):
            logger.debug(f"Skipping {device_path} (excluded prefix)")
            continue

        devices.append(device_path)

    return devices


def list_disk_devices(excluded_prefixes: Optional[Iterable[str]] = None,
                      timeout: Optional[float] = None) -> List[str]:
    """Run lsblk and return the disk device paths in listing order"""
    if timeout is None:
        timeout = config.DEFAULT_CONFIG['lsblk_timeout']

    cmd = [config.LSBLK_BINARY, '-d', '-o', 'NAME,TYPE', '-n', '-l']
    try:
        result = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            timeout=timeout
        )
    except FileNotFoundError as e:
        raise EnumerationError(f"{config.LSBLK_BINARY} not found") from e
    except subprocess.TimeoutExpired as e:
        raise EnumerationError(f"{config.LSBLK_BINARY} timed out after {timeout}s") from e

    if result.returncode != 0:
        stderr = result.stderr.decode('utf-8', errors='replace').strip()
        raise EnumerationError(f"lsblk command failed: {stderr}")

    devices = parse_lsblk_output(
        result.stdout.decode('utf-8', errors='replace'),
        excluded_prefixes
    )
    logger.info(f"Found {len(devices)} disk devices: {', '.join(devices)}")
    return devices

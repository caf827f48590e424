"""
Drive Scanner Module

Probes all devices in parallel and collects one DeviceRecord per device.
"""
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Dict, List, Optional, Sequence

from . import config
from .errors import ProbeFailed
from .models import DeviceRecord, DiskInfo
from .prober import probe_device

logger = logging.getLogger('DiskTemp.scanner')


def _probe_record(device: str, probe: Callable[[str], DiskInfo]) -> DeviceRecord:
    try:
        info = probe(device)
    except ProbeFailed as e:
        logger.warning(str(e))
        return DeviceRecord.failed(device, str(e))
    except Exception as e:
        logger.error(f"Unexpected error probing {device}: {e}", exc_info=True)
        return DeviceRecord.failed(device, f"Failed for device: {device} ({e})")
    return DeviceRecord.ok(device, info)


def scan_devices(devices: Sequence[str],
                 probe: Optional[Callable[[str], DiskInfo]] = None,
                 max_workers: Optional[int] = None) -> List[DeviceRecord]:
    """
    Probe every device concurrently.

    Returns records in the same order as devices. A device that fails gets a
    FAILED record; it never stops the others.
    """
    if probe is None:
        probe = probe_device
    if max_workers is None:
        max_workers = config.DEFAULT_CONFIG['max_workers']

    devices = list(dict.fromkeys(devices))
    if not devices:
        return []

    workers = max(1, min(max_workers, len(devices)))
    records: Dict[str, DeviceRecord] = {}

    with ThreadPoolExecutor(max_workers=workers) as executor:
        future_to_device = {executor.submit(_probe_record, device, probe): device for device in devices}

        for future in as_completed(future_to_device):
            device = future_to_device[future]
            records[device] = future.result()

    return [records[device] for device in devices]

#!/usr/bin/env python3
"""Print every smartctl attempt for each disk, without stopping at the first success."""
import os
import sys

sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from disktemp import drives, prober
from disktemp.errors import EnumerationError


def format_attempt(entry):
    hint = entry['hint'] or 'auto'
    status = f"exit {entry['returncode']}" if entry['returncode'] is not None else 'not run'
    if not entry['usable']:
        return f"  -d {hint:<5} {status}, {entry['stdout_bytes']} bytes: UNUSABLE"
    temp = entry['temperature']
    temp = f"{temp}°C" if temp is not None else 'N/A'
    return (f"  -d {hint:<5} {status}, {entry['stdout_bytes']} bytes: "
            f"{entry['vendor']} / {entry['model']} / {temp}")


def debug_scan(devices=None):
    if devices is None:
        print("--- 1. Running lsblk ---")
        try:
            devices = drives.list_disk_devices()
        except EnumerationError as e:
            print(f"Error running lsblk: {e}")
            return 1
        print('\n'.join(devices) or '(no disks)')

    print("\n--- 2. Probing every hint ---")
    for device in devices:
        print(device)
        trace = prober.trace_device(device)
        for entry in trace:
            print(format_attempt(entry))
        first = next((e['hint'] or 'auto' for e in trace if e['usable']), None)
        print(f"  -> reported from: {first or 'nothing (FAIL)'}")
    return 0


if __name__ == '__main__':
    sys.exit(debug_scan(sys.argv[1:] or None))

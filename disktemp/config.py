"""
Disk Temp Configuration Module

Holds the default constants for device enumeration and probing.
There is no config file: callers inject overrides through get_config()
or by passing values straight to the functions that need them.
"""
import logging

# Sentinels reported when a field cannot be recovered
UNKNOWN_VENDOR = 'Unknown Vendor'
UNKNOWN_MODEL = 'Unknown Model'

# Tried in this order after the first attempt without -d fails
DEVICE_TYPE_HINTS = ('ata', 'sat', 'scsi', 'nvme', 'sata')

# zvols and floppy nodes are reported as "disk" by lsblk
EXCLUDED_PREFIXES = ('/dev/zd', '/dev/fd')

SMARTCTL_BINARY = 'smartctl'
LSBLK_BINARY = 'lsblk'

# --- DEFAULT CONFIG ---
DEFAULT_CONFIG = {
    'device_type_hints': DEVICE_TYPE_HINTS,
    'excluded_prefixes': EXCLUDED_PREFIXES,
    'smartctl_timeout': 30,
    'lsblk_timeout': 10,
    'max_workers': 8,
    'log_level': logging.WARNING,
}


def get_config(overrides=None):
    """Return a copy of the defaults with overrides applied"""
    cfg = DEFAULT_CONFIG.copy()
    if not overrides:
        return cfg

    unknown = sorted(set(overrides) - set(DEFAULT_CONFIG))
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

    for key, value in overrides.items():
        # Keep list-like settings immutable so the defaults can't be mutated by callers
        if key in ('device_type_hints', 'excluded_prefixes'):
            value = tuple(value)
        cfg[key] = value
    return cfg

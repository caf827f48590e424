"""
smartctl Runner Module

Runs smartctl for one device and captures its output.
smartctl returns bitmask exit codes (e.g. 4 or 64) even when stdout holds a
full JSON report, so a non-zero exit is never treated as an error here.
"""
import logging
import subprocess
from typing import List, Optional

from . import config
from .models import ProbeAttempt

logger = logging.getLogger('DiskTemp.runner')


def build_smartctl_args(device: str, hint: Optional[str] = None) -> List[str]:
    """Build the smartctl command line, with `-d <hint>` when a hint is given"""
    args = [config.SMARTCTL_BINARY, '--json', '-a']
    if hint:
        args.extend(['-d', hint])
    args.append(device)
    return args


def run_smartctl(device: str, hint: Optional[str] = None,
                 timeout: Optional[float] = None) -> ProbeAttempt:
    """
    Run smartctl once and return the raw attempt.

    A missing binary or a timeout gives an attempt with empty output and
    returncode None, which the extractor rejects like any other bad output.
    """
    if timeout is None:
        timeout = config.DEFAULT_CONFIG['smartctl_timeout']

    cmd = build_smartctl_args(device, hint)
    try:
        result = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            timeout=timeout
        )
    except FileNotFoundError:
        logger.warning(f"{config.SMARTCTL_BINARY} not found, cannot probe {device}")
        return ProbeAttempt(device, hint, b'', b'', None)
    except subprocess.TimeoutExpired:
        logger.warning(f"smartctl timed out after {timeout}s on {device} (hint: {hint or 'none'})")
        return ProbeAttempt(device, hint, b'', b'', None)

    return ProbeAttempt(device, hint, result.stdout or b'', result.stderr or b'', result.returncode)

"""
Device Prober Module

Runs smartctl against one device, retrying with different `-d` device-type
hints until the output can be extracted.

The first attempt has no hint and lets smartctl auto-detect. Hints are then
tried in a fixed order and probing stops at the first usable result. Because
smartctl prints a JSON object even for a wrong device type, an early hint can
"succeed" with sentinel values while a later one would have found the real
model; the hint order decides which one gets reported.
"""
import logging
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from . import config
from .errors import ProbeFailed, UnusableOutput
from .extractor import extract
from .models import DiskInfo, ProbeAttempt
from .runner import run_smartctl

logger = logging.getLogger('DiskTemp.prober')

Runner = Callable[[str, Optional[str]], ProbeAttempt]


def attempt_hints(hints: Optional[Iterable[str]] = None) -> List[Optional[str]]:
    """The full attempt order: no hint first, then each configured hint"""
    if hints is None:
        hints = config.DEFAULT_CONFIG['device_type_hints']
    return [None] + [h for h in hints if h]


def iter_attempts(device: str, runner: Optional[Runner] = None,
                  hints: Optional[Iterable[str]] = None) -> Iterator[Tuple[ProbeAttempt, Optional[DiskInfo]]]:
    """
    Lazily run one attempt per hint, yielding (attempt, info).

    info is None when the attempt's output was unusable. Nothing is run
    until the caller asks for the next pair.
    """
    if runner is None:
        runner = run_smartctl

    for hint in attempt_hints(hints):
        attempt = runner(device, hint)
        try:
            info = extract(attempt.stdout)
        except UnusableOutput as e:
            logger.debug(f"{device}: hint {hint or 'none'} unusable (exit {attempt.returncode}): {e}")
            info = None
        yield attempt, info


def probe_device(device: str, runner: Optional[Runner] = None,
                 hints: Optional[Iterable[str]] = None) -> DiskInfo:
    """Return the info from the first usable attempt, or raise ProbeFailed"""
    for attempt, info in iter_attempts(device, runner, hints):
        if info is not None:
            logger.debug(f"{device}: usable output with hint {attempt.hint or 'none'}")
            return info
    raise ProbeFailed(device)


def trace_device(device: str, runner: Optional[Runner] = None,
                 hints: Optional[Iterable[str]] = None) -> List[Dict]:
    """
    Run every attempt, without stopping at the first success.

    Returns one summary per attempt:
    {
        'hint': 'ata',
        'returncode': 4,
        'stdout_bytes': 5120,
        'usable': True,
        'vendor': 'Seagate',
        'model': 'ST4000DM004',
        'temperature': 34
    }
    """
    trace = []
    for attempt, info in iter_attempts(device, runner, hints):
        entry = {
            'hint': attempt.hint,
            'returncode': attempt.returncode,
            'stdout_bytes': len(attempt.stdout),
            'usable': info is not None,
        }
        if info is not None:
            entry.update(info._asdict())
        trace.append(entry)
    return trace

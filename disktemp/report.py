"""
Report Module

Renders device records as a plain aligned table.
"""
import sys
from typing import Iterable, List

from .models import DeviceRecord

HEADERS = ['DEVICE', 'VENDOR', 'MODEL', 'TEMP', 'STATUS']
PADDING = 2
FAILED_LABEL = 'Failed'


def format_temperature(temp) -> str:
    return 'N/A' if temp is None else f'{temp}°C'


def record_row(record: DeviceRecord) -> List[str]:
    """Table cells for one record"""
    if record.is_ok:
        return [record.path, record.vendor, record.model,
                format_temperature(record.temperature), record.status.value]
    # Failed rows carry the probe message in the TEMP column
    return [record.path, FAILED_LABEL, FAILED_LABEL, record.message, record.status.value]


def format_table(records: Iterable[DeviceRecord], padding: int = PADDING) -> str:
    """Each column is as wide as its widest cell, plus padding on both sides"""
    rows = [HEADERS] + [record_row(r) for r in records]
    widths = [max(len(row[i]) for row in rows) for i in range(len(HEADERS))]
    pad = ' ' * padding

    lines = []
    for row in rows:
        line = ''.join(f'{pad}{cell.ljust(width)}{pad}' for cell, width in zip(row, widths))
        lines.append(line.rstrip())
    return '\n'.join(lines)


def print_report(records: Iterable[DeviceRecord], stream=None) -> None:
    stream = stream or sys.stdout
    print(format_table(records), file=stream)

"""
smartctl Output Extractor

Recovers vendor, model and temperature from `smartctl --json -a` output.

Each device family puts these facts under different keys:
- ATA/SATA: model_family, model_name, temperature.current,
  ata_smart_attributes.table (attribute 194/190)
- SCSI/SAS: scsi_vendor, scsi_product, scsi_model_name, temperature.current
- NVMe: model_name, nvme_smart_health_information_log.temperature
- older or odd builds: vendor, product, flat temperature, sata_temperature

Every field is resolved through an ordered list of lookups; the first one
that finds a value wins. When the output is not JSON at all, the text is
scanned line by line for something that looks like a temperature.
"""
import json
import re
from typing import Any, Callable, Dict, List, Optional

from .config import UNKNOWN_VENDOR, UNKNOWN_MODEL
from .errors import UnusableOutput
from .models import DiskInfo

Lookup = Callable[[Dict[str, Any]], Any]

TEMP_KEYWORD = 'temp'
MIN_TEXT_TEMP = 0
MAX_TEXT_TEMP = 150

# ASCII digits only; leading zeros are allowed ("035" in ATA attribute columns)
_INT_TOKEN = re.compile(r'([+-]?)0*([0-9]{1,3})')


# --- value helpers ---

def _as_int(value) -> Optional[int]:
    # JSON true/false decode to bool, which is an int subclass
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _as_str(value) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value
    return None


def _get(data, *keys):
    """Walk nested dicts, returning None as soon as a level is missing"""
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def _string(*keys) -> Lookup:
    return lambda data: _as_str(_get(data, *keys))


def _integer(*keys) -> Lookup:
    return lambda data: _as_int(_get(data, *keys))


# --- family-specific lookups ---

def _family_vendor(data) -> Optional[str]:
    """First word of model_family, e.g. "Seagate" from "Seagate BarraCuda 3.5"."""
    family = _as_str(data.get('model_family'))
    if family is None:
        return None
    return family.split()[0]


def _family_model(data) -> Optional[str]:
    """
    Everything after the first word of model_family.

    Heuristic only: "Western Digital Blue" yields "Digital Blue".
    """
    family = _as_str(data.get('model_family'))
    if family is None:
        return None
    rest = family.split()[1:]
    return ' '.join(rest) if rest else None


def _attribute_table_temperature(data) -> Optional[int]:
    """First ATA attribute whose name mentions a temperature."""
    table = _get(data, 'ata_smart_attributes', 'table')
    if not isinstance(table, list):
        return None

    for attr in table:
        if not isinstance(attr, dict):
            continue
        name = attr.get('name')
        if not isinstance(name, str) or TEMP_KEYWORD not in name.lower():
            continue

        value = _as_int(_get(attr, 'raw', 'value'))
        if value is None:
            value = _as_int(attr.get('value'))
        if value is not None:
            return value

    return None


VENDOR_LOOKUPS: List[Lookup] = [
    _family_vendor,
    _string('vendor'),
    _string('scsi_vendor'),
]

MODEL_LOOKUPS: List[Lookup] = [
    _string('model_name'),
    _string('product'),
    _string('scsi_product'),
    _string('scsi_model_name'),
    _family_model,
]

TEMPERATURE_LOOKUPS: List[Lookup] = [
    _integer('temperature', 'current'),
    _integer('temperature'),
    _integer('nvme_smart_health_information_log', 'temperature'),
    _attribute_table_temperature,
    _integer('sata_temperature'),
]


def first_present(data: Dict[str, Any], lookups: List[Lookup], default=None):
    """Return the first non-None result of lookups applied to data"""
    for lookup in lookups:
        value = lookup(data)
        if value is not None:
            return value
    return default


def _parse_document(text: str) -> Optional[Dict[str, Any]]:
    try:
        doc = json.loads(text)
    except ValueError:
        return None
    return doc if isinstance(doc, dict) else None


def extract_from_document(doc: Dict[str, Any]) -> DiskInfo:
    """Resolve vendor, model and temperature from a parsed smartctl document"""
    return DiskInfo(
        vendor=first_present(doc, VENDOR_LOOKUPS, UNKNOWN_VENDOR),
        model=first_present(doc, MODEL_LOOKUPS, UNKNOWN_MODEL),
        temperature=first_present(doc, TEMPERATURE_LOOKUPS),
    )


def extract_temperature_from_text(text: str) -> Optional[int]:
    """
    Scan plain smartctl output for a temperature.

    Takes the first integer token strictly between 0 and 150 on the first
    line mentioning "temp" that has one.
    """
    for line in text.splitlines():
        if TEMP_KEYWORD not in line.lower():
            continue
        for token in line.split():
            # Longer digit runs are out of range anyway
            match = _INT_TOKEN.fullmatch(token)
            if match is None:
                continue
            value = int(match.group(1) + match.group(2))
            if MIN_TEXT_TEMP < value < MAX_TEXT_TEMP:
                return value
    return None


def extract(raw: bytes) -> DiskInfo:
    """
    Extract vendor, model and temperature from raw smartctl stdout.

    A JSON object always gives a result, with sentinels for whatever is
    missing. Anything else goes through the text scan, and raises
    UnusableOutput if no temperature turns up there either.
    """
    text = raw.decode('utf-8', errors='replace')

    doc = _parse_document(text)
    if doc is not None:
        return extract_from_document(doc)

    temp = extract_temperature_from_text(text)
    if temp is None:
        raise UnusableOutput("smartctl output has no JSON document and no temperature line")
    return DiskInfo(UNKNOWN_VENDOR, UNKNOWN_MODEL, temp)

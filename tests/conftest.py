import json

from disktemp.models import ProbeAttempt


SATA_DOC = {
    "smartctl": {"version": [7, 3], "exit_status": 0},
    "device": {"name": "/dev/sda", "type": "sat", "protocol": "ATA"},
    "model_family": "Seagate BarraCuda 3.5",
    "model_name": "ST4000DM004-2CV104",
    "temperature": {"current": 34},
    "ata_smart_attributes": {
        "table": [
            {"id": 1, "name": "Raw_Read_Error_Rate", "value": 82, "raw": {"value": 170214960}},
            {"id": 194, "name": "Temperature_Celsius", "value": 34, "raw": {"value": 34}},
        ]
    },
}

NVME_DOC = {
    "device": {"name": "/dev/nvme0n1", "type": "nvme", "protocol": "NVMe"},
    "model_name": "Samsung SSD 980 PRO 1TB",
    "nvme_smart_health_information_log": {"temperature": 41, "percentage_used": 2},
}

SCSI_DOC = {
    "device": {"name": "/dev/sdb", "type": "scsi", "protocol": "SCSI"},
    "scsi_vendor": "HGST",
    "scsi_product": "HUH721212AL5200",
    "scsi_model_name": "HGST HUH721212AL5200",
    "temperature": {"current": 29, "drive_trip": 85},
}

# smartctl still prints a JSON object when it cannot open the device
OPEN_FAILED_DOC = {
    "smartctl": {
        "messages": [{"string": "Smartctl open device: /dev/sdz failed: No such device", "severity": "error"}],
        "exit_status": 2,
    }
}

ATA_TEXT = b"""smartctl 7.3 2022-02-28 r5338 [x86_64-linux-6.1.0] (local build)
ID# ATTRIBUTE_NAME          FLAG     VALUE WORST THRESH TYPE      UPDATED  WHEN_FAILED RAW_VALUE
  9 Power_On_Hours          0x0032   091   091   000    Old_age   Always       -       8123
194 Temperature_Celsius ... 35 (Min/Max 18/45)
"""


def as_bytes(doc):
    return json.dumps(doc).encode('utf-8')


class FakeRunner:
    """Returns canned stdout per (device, hint) and records every call."""

    def __init__(self, outputs=None, default=b''):
        self.outputs = outputs or {}
        self.default = default
        self.calls = []

    def __call__(self, device, hint=None):
        self.calls.append((device, hint))
        stdout = self.outputs.get((device, hint), self.default)
        returncode = 0 if stdout else 1
        return ProbeAttempt(device, hint, stdout, b'', returncode)

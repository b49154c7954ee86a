import pytest

from hostfetch.models import DiskEntry, NetworkEntry, ReportModel, TemperatureEntry

GB = 1024 ** 3
MB = 1024 ** 2


@pytest.fixture
def make_report():
    def _make(**overrides):
        fields = {
            "username": "alice",
            "hostname": "box",
            "os_name": "TestOS",
            "kernel_version": "1.0",
            "uptime_seconds": 3661,
        }
        fields.update(overrides)
        return ReportModel(**fields)

    return _make


@pytest.fixture
def full_report(make_report):
    return make_report(
        disks={
            "/": DiskEntry(mount_point="/", total_gb=10, used_gb=5, filesystem="ext4"),
            "/boot": DiskEntry(mount_point="/boot", total_gb=1, used_gb=0, filesystem="vfat"),
        },
        temperatures={
            "coretemp Core 0": TemperatureEntry(label="coretemp Core 0", celsius=41.26),
        },
        networks={
            "eth0": NetworkEntry(
                interface_name="eth0",
                bytes_sent=3 * MB + 10,
                bytes_received=7 * MB,
                packets_sent=12,
                packets_received=34,
            ),
        },
    )

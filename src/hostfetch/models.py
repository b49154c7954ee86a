"""Report data model."""

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class DiskEntry:
    """Usage of one mounted filesystem, in whole gigabytes."""

    mount_point: str
    total_gb: int
    used_gb: int
    filesystem: str


@dataclass(frozen=True)
class TemperatureEntry:
    """One sensor reading. ``celsius`` is NaN when the probe gave nothing."""

    label: str
    celsius: float


@dataclass(frozen=True)
class NetworkEntry:
    """Cumulative interface counters since the platform's counter epoch."""

    interface_name: str
    bytes_sent: int
    bytes_received: int
    packets_sent: int
    packets_received: int


@dataclass(frozen=True)
class ReportModel:
    """A single snapshot of the host, built once and only read afterwards."""

    username: str
    hostname: str
    os_name: str
    kernel_version: str
    uptime_seconds: int
    disks: Dict[str, DiskEntry] = field(default_factory=dict)
    temperatures: Dict[str, TemperatureEntry] = field(default_factory=dict)
    networks: Dict[str, NetworkEntry] = field(default_factory=dict)

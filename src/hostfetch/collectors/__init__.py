"""Metrics collectors for the system summary."""

from .identity import get_username, get_hostname, get_os_name, get_kernel_version
from .uptime import get_uptime
from .disks import collect_disks
from .sensors import collect_temperatures
from .network import collect_network_interfaces
from .snapshot import collect_report

__all__ = [
    "get_username",
    "get_hostname",
    "get_os_name",
    "get_kernel_version",
    "get_uptime",
    "collect_disks",
    "collect_temperatures",
    "collect_network_interfaces",
    "collect_report",
]

"""Network interface collector."""

from typing import Dict

import psutil

from ..formatting import decode_lossy
from ..models import NetworkEntry
from .base import query


def collect_network_interfaces() -> Dict[str, NetworkEntry]:
    """
    Collect cumulative traffic counters for every network interface.

    Returns a mapping of interface name to NetworkEntry.
    """
    interfaces = {}

    io_counters = query(lambda: psutil.net_io_counters(pernic=True), {}, "network counters")

    for iface_name, counters in io_counters.items():
        name = decode_lossy(iface_name)
        interfaces[name] = NetworkEntry(
            interface_name=name,
            bytes_sent=counters.bytes_sent,
            bytes_received=counters.bytes_recv,
            packets_sent=counters.packets_sent,
            packets_received=counters.packets_recv,
        )

    return interfaces

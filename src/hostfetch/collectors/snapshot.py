"""Assemble one report snapshot from all collectors."""

import logging

from ..models import ReportModel
from .disks import collect_disks
from .identity import get_hostname, get_kernel_version, get_os_name, get_username
from .network import collect_network_interfaces
from .sensors import collect_temperatures
from .uptime import get_uptime

logger = logging.getLogger(__name__)


def collect_report() -> ReportModel:
    """
    Query the host once and build the report model.

    Never raises: anything the platform cannot answer is replaced by its
    fallback ("unknown", 0 or an empty mapping).
    """
    report = ReportModel(
        username=get_username(),
        hostname=get_hostname(),
        os_name=get_os_name(),
        kernel_version=get_kernel_version(),
        uptime_seconds=get_uptime(),
        disks=collect_disks(),
        temperatures=collect_temperatures(),
        networks=collect_network_interfaces(),
    )
    logger.debug(
        f"Collected {len(report.disks)} disks, {len(report.temperatures)} sensors, "
        f"{len(report.networks)} interfaces"
    )
    return report

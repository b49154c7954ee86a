"""Disk usage collector."""

import logging
from typing import Dict

import psutil

from ..formatting import decode_lossy
from ..models import DiskEntry
from .base import query

logger = logging.getLogger(__name__)

BYTES_PER_GB = 1024 ** 3


def disk_entry(mount_point: str, total_bytes: int, available_bytes: int, filesystem) -> DiskEntry:
    """
    Build a DiskEntry from raw byte counts.

    Used space is total minus available, both floored to whole gigabytes.
    """
    return DiskEntry(
        mount_point=mount_point,
        total_gb=total_bytes // BYTES_PER_GB,
        used_gb=max(total_bytes - available_bytes, 0) // BYTES_PER_GB,
        filesystem=decode_lossy(filesystem),
    )


def collect_disks() -> Dict[str, DiskEntry]:
    """
    Collect disk usage for all mounted filesystems.

    Returns a mapping of mount point to DiskEntry. Mounts that cannot be
    read (stale, permission denied) are left out.
    """
    disks = {}

    for partition in query(lambda: psutil.disk_partitions(all=False), [], "mounted filesystems"):
        try:
            usage = psutil.disk_usage(partition.mountpoint)
        except Exception as e:
            logger.debug(f"Skipping {partition.mountpoint!r}: {e}")
            continue

        mount_point = decode_lossy(partition.mountpoint)
        # psutil's "free" is what is available to unprivileged users
        disks[mount_point] = disk_entry(mount_point, usage.total, usage.free, partition.fstype)

    return disks

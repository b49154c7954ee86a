"""Side-by-side text rendering of a report next to the logo panel."""

import sys
from typing import List, Sequence, TextIO

from .formatting import format_duration
from .models import ReportModel

LOGO_HEIGHT = 9
LOGO_WIDTH = 32
LOGO = (
    "                                ",
    "    #       #      *#*          ",
    "    ##     ##      *#*          ",
    "    #  # #  #      *#*          ",
    "    #   #   #      *#*          ",
    "    #       #      *#*          ",
    "    #       #      *#*          ",
    "    #       #      *#*          ",
    "                                ",
)

BYTES_PER_MB = 1024 ** 2


def report_lines(model: ReportModel) -> List[str]:
    """
    Build the text column of the report, one entry per output row.

    Disk, temperature and network rows follow the mapping order of the
    model, which is whatever order the platform enumerated them in.
    """
    lines = [
        f"{model.username}@{model.hostname}",
        # Character count, so multi-byte names may not underline exactly
        "-" * (len(model.username) + len(model.hostname) + 1),
        f"OS:        {model.os_name}",
        f"Kernel:    {model.kernel_version}",
        f"Uptime:    {format_duration(model.uptime_seconds)}",
    ]

    for mount_point, disk in model.disks.items():
        lines.append(
            f"Disk:      {mount_point} - {disk.used_gb} GB used / {disk.total_gb} GB total, "
            f"FS: {disk.filesystem}"
        )

    for label, temp in model.temperatures.items():
        lines.append(f"Temp:      {label} - {temp.celsius:.1f}°C")

    for interface_name, net in model.networks.items():
        lines.append(
            f"Network:   {interface_name} - {net.bytes_sent // BYTES_PER_MB} MB sent, "
            f"{net.bytes_received // BYTES_PER_MB} MB recv, "
            f"{net.packets_sent} pkts sent, {net.packets_received} pkts recv"
        )

    return lines


def compose(lines: Sequence[str], logo: Sequence[str] = LOGO, width: int = LOGO_WIDTH) -> List[str]:
    """
    Pair each report line with the logo row of the same index.

    Lines past the bottom of the logo get blank padding of the logo's width;
    logo rows past the last line are emitted on their own.
    """
    rows = []
    for idx, line in enumerate(lines):
        if idx < len(logo):
            rows.append(f"{logo[idx]}{line}")
        else:
            rows.append(f"{' ' * width}{line}")
    rows.extend(logo[len(lines):])
    return rows


def render(model: ReportModel) -> str:
    """Render the full report, with one blank line above and below."""
    rows = compose(report_lines(model))
    return "\n" + "\n".join(rows) + "\n\n"


def write_report(model: ReportModel, stream: TextIO = None) -> None:
    """Write the rendered report to ``stream`` (stdout by default)."""
    stream = stream or sys.stdout
    stream.write(render(model))
    stream.flush()

"""Temperature sensor collector."""

from typing import Dict

import psutil

from ..models import TemperatureEntry
from .base import query


def sensor_label(chip: str, label: str) -> str:
    return f"{chip} {label}" if label else chip


def collect_temperatures() -> Dict[str, TemperatureEntry]:
    """
    Collect the current reading of every temperature sensor.

    Platforms without sensor support (psutil has no sensors_temperatures
    there) simply give an empty mapping. A reading psutil could not take is
    stored as NaN.
    """
    temperatures = {}

    chips = query(lambda: psutil.sensors_temperatures(), {}, "temperature sensors") or {}

    for chip, entries in chips.items():
        for entry in entries:
            label = sensor_label(chip, entry.label)
            celsius = float(entry.current) if entry.current is not None else float("nan")
            temperatures[label] = TemperatureEntry(label=label, celsius=celsius)

    return temperatures

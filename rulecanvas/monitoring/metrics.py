"""System metrics snapshot used as live rule inputs.

Keys match the variable names rule authors type into condition blocks
(``cpuPercent > 80``, ``batteryLevel < 20``, ``hour >= 22`` ...).
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

import psutil

logger = logging.getLogger(__name__)

MB = 1024 ** 2
GB = 1024 ** 3

# The first non-blocking cpu_percent call in a process returns 0.0; prime it
# so later samples measure usage since the previous call.
psutil.cpu_percent(interval=None)


def _time_metrics(now: datetime) -> dict[str, Any]:
    return {
        "hour": now.hour,
        "minute": now.minute,
        # 0 = Sunday ... 6 = Saturday
        "dayOfWeek": now.isoweekday() % 7,
        "dayOfMonth": now.day,
    }


def sample_system_metrics(
    now: datetime | None = None,
    disk_path: str = "/",
    cpu_interval: float | None = None,
) -> dict[str, Any]:
    """Take a snapshot of memory, CPU, battery, storage and clock values.

    Metrics the platform cannot provide (e.g. battery on a desktop) are left
    out, so conditions on them evaluate to false. ``cpu_interval`` blocks for
    that many seconds to measure CPU usage; ``None`` reports usage since the
    previous sample.
    """
    metrics: dict[str, Any] = {}

    memory = psutil.virtual_memory()
    metrics["memoryUsedMB"] = round(memory.used / MB)
    metrics["memoryTotalMB"] = round(memory.total / MB)
    metrics["memoryPercent"] = round(memory.percent)

    metrics["cpuPercent"] = round(psutil.cpu_percent(interval=cpu_interval))

    battery = psutil.sensors_battery() if hasattr(psutil, "sensors_battery") else None
    if battery is not None:
        metrics["batteryLevel"] = round(battery.percent)
        metrics["batteryCharging"] = "yes" if battery.power_plugged else "no"

    try:
        usage = psutil.disk_usage(disk_path)
    except OSError as e:
        logger.debug("Disk usage unavailable for %s: %s", disk_path, e)
    else:
        metrics["storageUsedGB"] = f"{usage.used / GB:.2f}"
        metrics["storageTotalGB"] = f"{usage.total / GB:.2f}"
        metrics["storagePercent"] = round(usage.percent)

    metrics.update(_time_metrics(now or datetime.now()))
    return metrics

"""System information collection."""

import logging
import platform
from dataclasses import dataclass
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class DiskInfo:
    """Usage of a single mounted disk or partition."""

    name: str  # mount point
    file_system: str  # e.g. 'ext4', 'apfs', 'NTFS'
    total_space: int
    available_space: int

    @property
    def used_space(self) -> int:
        return max(self.total_space - self.available_space, 0)


@dataclass(frozen=True)
class NetworkInfo:
    """Traffic counters for one network interface, since boot."""

    name: str
    bytes_received: int
    bytes_transmitted: int
    packets_received: int
    packets_transmitted: int


@dataclass(frozen=True)
class SystemInfo:
    """Snapshot of system state at time of collection.

    Byte values are raw. ``disks`` and ``networks`` are None when that
    section was not collected.
    """

    os_name: str
    os_version: str
    cpu_cores: int
    total_memory: int
    used_memory: int
    total_swap: int
    used_swap: int
    disks: Optional[tuple[DiskInfo, ...]] = None
    networks: Optional[tuple[NetworkInfo, ...]] = None


class MetricsSource(Protocol):
    """Host metrics provider consumed by ``collect_system_info``.

    Accessors return None (or 0, or an empty list) for anything the host
    does not expose.
    """

    def refresh(self) -> None: ...

    def os_name(self) -> Optional[str]: ...

    def os_version(self) -> Optional[str]: ...

    def physical_core_count(self) -> Optional[int]: ...

    def total_memory(self) -> int: ...

    def used_memory(self) -> int: ...

    def total_swap(self) -> int: ...

    def used_swap(self) -> int: ...

    def disks(self) -> list[tuple[str, str, int, int]]: ...

    def networks(self) -> list[tuple[str, int, int, int, int]]: ...


class PsutilSource:
    """MetricsSource backed by psutil and the platform module.

    ``refresh`` reads memory and swap once so that total and used come
    from the same sample. Disks and network counters are read on access.
    """

    def __init__(self):
        self._memory = None
        self._swap = None

    def refresh(self) -> None:
        import psutil

        try:
            self._memory = psutil.virtual_memory()
        except Exception as e:
            logger.debug(f"Memory read failed: {e}")
            self._memory = None
        try:
            self._swap = psutil.swap_memory()
        except Exception as e:
            logger.debug(f"Swap read failed: {e}")
            self._swap = None

    def os_name(self) -> Optional[str]:
        system = platform.system()
        if system == "Linux":
            release = _os_release()
            return release.get("NAME") or system
        if system == "Darwin":
            return "macOS"
        return system or None

    def os_version(self) -> Optional[str]:
        system = platform.system()
        if system == "Linux":
            release = _os_release()
            return release.get("VERSION_ID") or release.get("VERSION") or None
        if system == "Darwin":
            return platform.mac_ver()[0] or None
        return platform.version() or None

    def physical_core_count(self) -> Optional[int]:
        import psutil

        try:
            return psutil.cpu_count(logical=False)
        except Exception as e:
            logger.debug(f"Physical core count failed: {e}")
            return None

    def total_memory(self) -> int:
        return self._memory.total if self._memory else 0

    def used_memory(self) -> int:
        # Matches what the OS reports as in use: everything not available.
        if not self._memory:
            return 0
        return max(self._memory.total - self._memory.available, 0)

    def total_swap(self) -> int:
        return self._swap.total if self._swap else 0

    def used_swap(self) -> int:
        return self._swap.used if self._swap else 0

    def disks(self) -> list[tuple[str, str, int, int]]:
        import psutil

        try:
            partitions = psutil.disk_partitions(all=False)
        except Exception as e:
            logger.debug(f"Disk enumeration failed: {e}")
            return []

        result = []
        for part in partitions:
            try:
                usage = psutil.disk_usage(part.mountpoint)
                total, available = usage.total, usage.free
            except Exception as e:
                logger.debug(f"Disk usage for {part.mountpoint} failed: {e}")
                total, available = 0, 0
            result.append((part.mountpoint, part.fstype, total, available))
        return result

    def networks(self) -> list[tuple[str, int, int, int, int]]:
        import psutil

        try:
            counters = psutil.net_io_counters(pernic=True)
        except Exception as e:
            logger.debug(f"Network counters failed: {e}")
            return []

        return [
            (
                name,
                stats.bytes_recv,
                stats.bytes_sent,
                stats.packets_recv,
                stats.packets_sent,
            )
            for name, stats in counters.items()
        ]


def _os_release() -> dict[str, str]:
    """Parsed /etc/os-release, or an empty dict."""
    try:
        return platform.freedesktop_os_release()
    except OSError:
        return {}


def collect_system_info(
    source: Optional[MetricsSource] = None,
    include_disks: bool = True,
    include_networks: bool = True,
) -> SystemInfo:
    """Collect current system information.

    Args:
        source: Metrics provider. Defaults to a PsutilSource.
        include_disks: Whether to enumerate disks.
        include_networks: Whether to enumerate network interfaces.

    Returns:
        SystemInfo with current system state. Unavailable values are
        replaced with "N/A" or 0; this function does not raise.
    """
    if source is None:
        source = PsutilSource()
    source.refresh()

    disks = None
    if include_disks:
        disks = tuple(
            DiskInfo(
                name=name,
                file_system=file_system,
                total_space=total,
                available_space=available,
            )
            for name, file_system, total, available in source.disks()
        )
        logger.debug(f"Collected {len(disks)} disks")

    networks = None
    if include_networks:
        networks = tuple(
            NetworkInfo(
                name=name,
                bytes_received=received,
                bytes_transmitted=transmitted,
                packets_received=packets_received,
                packets_transmitted=packets_transmitted,
            )
            for name, received, transmitted, packets_received, packets_transmitted
            in source.networks()
        )
        logger.debug(f"Collected {len(networks)} network interfaces")

    return SystemInfo(
        os_name=source.os_name() or NOT_AVAILABLE,
        os_version=source.os_version() or NOT_AVAILABLE,
        cpu_cores=source.physical_core_count() or 0,
        total_memory=source.total_memory(),
        used_memory=source.used_memory(),
        total_swap=source.total_swap(),
        used_swap=source.used_swap(),
        disks=disks,
        networks=networks,
    )

"""Human-readable console report."""

from rich.console import Console

from sysnap.collectors.system_info import SystemInfo
from sysnap.utils.formatting import format_bytes, usage_percent


def render_report(info: SystemInfo) -> list[str]:
    """Build the console report lines for a snapshot.

    Byte values go through ``format_bytes``; the snapshot itself is not
    changed. Sections that were not collected are left out.
    """
    lines = [
        "System Information:",
        f"  OS Name: {info.os_name}",
        f"  OS Version: {info.os_version}",
        f"  CPU Cores: {info.cpu_cores}",
        f"  Total Memory: {format_bytes(info.total_memory)}",
        f"  Used Memory: {format_bytes(info.used_memory)}",
        f"  Total Swap: {format_bytes(info.total_swap)}",
        f"  Used Swap: {format_bytes(info.used_swap)}",
    ]

    if info.disks is not None:
        lines.append("")
        lines.append("Disk Usage:")
        if not info.disks:
            lines.append("  No disks detected")
        for disk in info.disks:
            used = disk.used_space
            pct = usage_percent(used, disk.total_space)
            lines.append(
                f"  {disk.name}: {format_bytes(used)} / {format_bytes(disk.total_space)} "
                f"({pct:.1f}% used, {format_bytes(disk.available_space)} available) "
                f"[{disk.file_system}]"
            )

    if info.networks is not None:
        lines.append("")
        lines.append("Network Interfaces:")
        if not info.networks:
            lines.append("  No network interfaces detected")
        for net in info.networks:
            lines.append(f"  {net.name}:")
            lines.append(
                f"    Received: {format_bytes(net.bytes_received)} "
                f"({net.packets_received} packets)"
            )
            lines.append(
                f"    Transmitted: {format_bytes(net.bytes_transmitted)} "
                f"({net.packets_transmitted} packets)"
            )

    return lines


def print_report(info: SystemInfo, console: Console | None = None) -> None:
    """Print the report for ``info`` to stdout."""
    console = console or Console()
    for line in render_report(info):
        # Disk lines contain "[fs]" which rich would read as markup.
        console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)

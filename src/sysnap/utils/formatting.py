"""Human-readable formatting for byte counts."""

UNITS = ("B", "KB", "MB", "GB", "TB")
THRESHOLD = 1024


def format_bytes(num_bytes: int) -> str:
    """Format a byte count using binary (1024-based) units.

    Picks the largest unit not exceeding the value, capped at TB. Plain
    bytes are shown as an exact integer, larger units with 2 decimals.

    Examples:
        >>> format_bytes(0)
        '0 B'
        >>> format_bytes(1536)
        '1.50 KB'
        >>> format_bytes(1073741824)
        '1.00 GB'
    """
    if num_bytes <= 0:
        return "0 B"

    # Integer floor(log_1024(n)); avoids float error at exact powers.
    unit_index = 0
    scale = 1
    while unit_index < len(UNITS) - 1 and num_bytes >= scale * THRESHOLD:
        scale *= THRESHOLD
        unit_index += 1

    if unit_index == 0:
        return f"{num_bytes} {UNITS[0]}"
    return f"{num_bytes / scale:.2f} {UNITS[unit_index]}"


def usage_percent(used: int, total: int) -> float:
    """Percentage of ``total`` taken by ``used``, 0.0 for an empty total."""
    if total <= 0:
        return 0.0
    return used / total * 100.0

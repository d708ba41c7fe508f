"""JSON snapshot output."""

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any

from sysnap.collectors.system_info import SystemInfo
from sysnap.errors import ErrorKind, ReportError

logger = logging.getLogger(__name__)

OUTPUT_FILENAME = "system_info.json"


def system_info_to_dict(info: SystemInfo) -> dict[str, Any]:
    """Convert a snapshot to a JSON-serializable dict of raw values.

    Keys follow the field order of SystemInfo. Sections that were not
    collected are omitted.
    """
    data = asdict(info)
    for key in ("disks", "networks"):
        if data[key] is None:
            del data[key]
        else:
            data[key] = list(data[key])
    return data


def save_json_report(info: SystemInfo, directory: Path | None = None) -> Path:
    """Write the snapshot to ``system_info.json``.

    Serializes first, then creates (or truncates) the file and writes it.

    Args:
        info: Snapshot to save.
        directory: Where to write. Defaults to the current directory.

    Returns:
        Path to the written file.

    Raises:
        ReportError: With kind SERIALIZATION, FILE_CREATION or FILE_WRITE.
    """
    try:
        payload = json.dumps(system_info_to_dict(info), indent=2)
    except (TypeError, ValueError) as e:
        raise ReportError(ErrorKind.SERIALIZATION, e) from e

    output_path = (directory or Path.cwd()) / OUTPUT_FILENAME

    try:
        f = open(output_path, "w", encoding="utf-8")
    except OSError as e:
        raise ReportError(ErrorKind.FILE_CREATION, e) from e

    # close() can report deferred write errors (NFS quota, EIO).
    try:
        with f:
            f.write(payload)
            f.flush()
    except OSError as e:
        raise ReportError(ErrorKind.FILE_WRITE, e) from e

    logger.info(f"Wrote {output_path}")
    return output_path

# dance_timeline/io/output.py

"""Write rendered chart documents to disk."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)


def write_documents(output_dir: Path, documents: Mapping[str, str]) -> list[Path]:
    """Write each filename -> content pair into output_dir."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []

    for name, content in documents.items():
        path = output_dir / name
        with path.open("w", encoding="utf-8") as f:
            f.write(content)
        written.append(path)

    logger.info("Wrote %d documents to %s", len(written), output_dir)
    return written

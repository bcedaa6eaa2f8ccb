"""Umbrella file that includes every generated sprite."""
import os
from pathlib import Path
from typing import List

from ..errors import DirectoryError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class IndexAggregator:
    """Write an index document with one ``!include`` per sprite document."""

    def __init__(self, config: dict):
        out_cfg = config.get("output", {})
        self.sprite_extension = out_cfg.get("sprite_extension", ".puml")
        self.index_filename = out_cfg.get("index_filename", "all_sprites.puml")

    def collect(self, output_root: Path) -> List[str]:
        """Return sorted forward-slash paths of every sprite under ``output_root``."""
        output_root = Path(output_root)
        index_path = output_root / self.index_filename

        def _raise(error: OSError):
            raise DirectoryError(f"Cannot scan {output_root}: {error}") from error

        if not output_root.is_dir():
            raise DirectoryError(f"Not a directory: {output_root}")

        entries = []
        for dirpath, _, filenames in os.walk(output_root, onerror=_raise):
            for filename in filenames:
                path = Path(dirpath) / filename
                if not filename.lower().endswith(self.sprite_extension.lower()):
                    continue
                if path == index_path or not path.is_file():
                    continue
                entries.append(path.relative_to(output_root).as_posix())

        return sorted(entries)

    def render(self, entries: List[str]) -> str:
        lines = ["@startuml", "' Index file for all generated sprites", ""]
        lines.extend(f"!include {entry}" for entry in entries)
        lines.extend(["", "@enduml"])
        return "\n".join(lines) + "\n"

    def aggregate(self, output_root) -> Path:
        """
        Scan ``output_root`` and write the index file into it.

        Returns:
            Path of the written index file.

        Raises:
            DirectoryError: ``output_root`` cannot be scanned.
        """
        output_root = Path(output_root)
        entries = self.collect(output_root)
        index_path = output_root / self.index_filename

        with open(index_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(self.render(entries))

        logger.info(
            f"Generated index file with {len(entries)} sprite inclusions: {index_path}"
        )
        return index_path

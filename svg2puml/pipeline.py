"""Batch orchestrator that ties the full conversion together."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

import yaml

from .encoding.raster_reader import read_bitmap
from .encoding.sprite_encoder import SpriteEncoder
from .errors import (
    DirectoryError,
    RasterizerNotFoundError,
    RasterizerProcessError,
    SpriteConversionError,
)
from .naming import SpriteJob, plan_job
from .output.index_aggregator import IndexAggregator
from .rasterizing.backends import Rasterizer
from .rasterizing.invoker import RasterizerInvoker
from .rasterizing.locator import RasterizerLocator
from .utils.logger import get_logger, set_level

logger = get_logger(__name__)


@dataclass(frozen=True)
class ConversionTally:
    """Success and failure counts for one run."""

    succeeded: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.succeeded + self.failed

    def record_success(self) -> "ConversionTally":
        return ConversionTally(self.succeeded + 1, self.failed)

    def record_failure(self) -> "ConversionTally":
        return ConversionTally(self.succeeded, self.failed + 1)


class BatchPipeline:
    """
    Convert a directory tree of SVG files into PlantUML sprites.

    Pipeline:
      1. Snapshot every SVG file under the input root
      2. Select one rasterizer for the whole run
      3. Per file: rasterize to PNG, decode, encode, write .puml
      4. Write the index file including every sprite
    """

    def __init__(
        self,
        config: dict = None,
        config_path: str = None,
        locator: RasterizerLocator = None,
        invoker: RasterizerInvoker = None,
        encoder: SpriteEncoder = None,
        aggregator: IndexAggregator = None,
    ):
        """
        Initialize with a config dict and/or YAML path.

        Args:
            config: Direct config dictionary, merged over everything else.
            config_path: Path to a YAML config file merged over the defaults.
            locator, invoker, encoder, aggregator: Component overrides.
        """
        self.config = self._load_config(config, config_path)
        set_level(self.config.get("logging", {}).get("level", "INFO"))

        self.extension = self.config.get("input", {}).get("extension", ".svg")
        self.keep_rasters = self.config.get("output", {}).get("keep_rasters", True)

        self.locator = locator or RasterizerLocator(self.config)
        self.invoker = invoker or RasterizerInvoker()
        self.encoder = encoder or SpriteEncoder()
        self.aggregator = aggregator or IndexAggregator(self.config)

    def _load_config(self, config, config_path) -> dict:
        """Load and merge configuration."""
        default_path = Path(__file__).parent / "config" / "defaults.yaml"
        if default_path.exists():
            with open(default_path) as f:
                base_config = yaml.safe_load(f) or {}
        else:
            base_config = {}

        if config_path:
            with open(config_path) as f:
                file_config = yaml.safe_load(f) or {}
            base_config = self._deep_merge(base_config, file_config)

        if config:
            base_config = self._deep_merge(base_config, config)

        return base_config

    @staticmethod
    def _deep_merge(base: dict, override: dict) -> dict:
        """Deep merge two dicts. Override takes precedence."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = BatchPipeline._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def find_sources(self, input_root: Path) -> List[Path]:
        """
        List every SVG file under ``input_root`` in sorted walk order.

        Raises:
            DirectoryError: the root is missing or cannot be walked.
        """
        if not input_root.is_dir():
            raise DirectoryError(f"Not a directory: {input_root}")

        def _raise(error: OSError):
            raise DirectoryError(f"Cannot scan {input_root}: {error}") from error

        suffix = self.extension.lower()
        sources = []
        for dirpath, dirnames, filenames in os.walk(input_root, onerror=_raise):
            dirnames.sort()
            for filename in sorted(filenames):
                path = Path(dirpath) / filename
                if filename.lower().endswith(suffix) and path.is_file():
                    sources.append(path)
        return sources

    def run(self, input_root, output_root) -> ConversionTally:
        """
        Convert every SVG under ``input_root`` into ``output_root``.

        Returns:
            ConversionTally with per-file success and failure counts.

        Raises:
            DirectoryError: the input root cannot be scanned or the output
                root cannot be created.
            RasterizerNotFoundError: no supported rasterizer is installed.
        """
        input_root = Path(os.path.normpath(os.path.abspath(input_root)))
        output_root = Path(os.path.normpath(os.path.abspath(output_root)))
        try:
            output_root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryError(f"Cannot create {output_root}: {e}") from e

        logger.info(f"Scanning directory: {input_root}")
        sources = self.find_sources(input_root)
        logger.info(f"Found {len(sources)} SVG files to process")

        rasterizer = self.locator.locate()
        if rasterizer is None:
            raise RasterizerNotFoundError(
                "No suitable SVG to PNG conversion tool found. "
                "Please install Inkscape, ImageMagick, or rsvg-convert."
            )
        logger.info(f"Using conversion tool: {rasterizer.name}")

        tally = ConversionTally()
        seen: Dict[str, Path] = {}
        index_path = output_root / self.aggregator.index_filename
        for source in sources:
            job = plan_job(input_root, output_root, source, self.config)
            self._check_collision(job, seen)
            if job.sprite_path == index_path:
                logger.warning(
                    f"Sprite for {job.relative_path} will be overwritten by the index file {index_path}"
                )
            tally = self._process(job, rasterizer, tally)

        if tally.succeeded > 0:
            try:
                self.aggregator.aggregate(output_root)
            except (DirectoryError, OSError) as e:
                logger.error(f"Error generating index file: {e}")

        return tally

    @staticmethod
    def _check_collision(job: SpriteJob, seen: Dict[str, Path]) -> None:
        other = seen.setdefault(job.identifier, job.relative_path)
        if other != job.relative_path:
            logger.warning(
                f"Sprite name ${job.identifier} is shared by {other} "
                f"and {job.relative_path}"
            )

    def _process(self, job: SpriteJob, rasterizer: Rasterizer, tally: ConversionTally) -> ConversionTally:
        """Convert one file and return the updated tally."""
        try:
            self.convert_file(job, rasterizer)
        except (SpriteConversionError, OSError) as e:
            logger.error(f"Error processing {job.relative_path}: {e}")
            return tally.record_failure()

        logger.info(f"Converted: {job.relative_path}")
        return tally.record_success()

    def convert_file(self, job: SpriteJob, rasterizer: Rasterizer) -> Path:
        """
        Rasterize, decode, encode and write one sprite.

        Returns:
            Path of the written sprite document.
        """
        job.target_dir.mkdir(parents=True, exist_ok=True)
        try:
            if not self.invoker.convert(rasterizer, job.source, job.raster_path):
                raise RasterizerProcessError("SVG to PNG conversion failed")

            bitmap = read_bitmap(job.raster_path)
            return self.encoder.write(job.sprite_path, bitmap, job.identifier)
        finally:
            if not self.keep_rasters and job.raster_path.exists():
                job.raster_path.unlink()

"""Path and identifier derivation for sprite jobs."""
import re
from dataclasses import dataclass
from pathlib import Path, PurePath

_INVALID_CHARS = re.compile(r"[^A-Za-z0-9_]")


def strip_extension(name: str, extension: str) -> str:
    """Remove a trailing ``extension`` from ``name``, ignoring case."""
    if extension and name.lower().endswith(extension.lower()):
        return name[: -len(extension)]
    return name


def sprite_identifier(relative_path, extension: str = ".svg") -> str:
    """
    Derive the sprite name for a file from its path relative to the input root.

    >>> sprite_identifier("icons/ok.svg")
    'icons_ok'
    """
    text = str(PurePath(relative_path))
    return _INVALID_CHARS.sub("_", strip_extension(text, extension))


@dataclass(frozen=True)
class SpriteJob:
    """Everything needed to convert one SVG file."""

    source: Path
    relative_path: Path
    target_dir: Path
    raster_path: Path
    sprite_path: Path
    identifier: str


def plan_job(input_root: Path, output_root: Path, source: Path, config: dict) -> SpriteJob:
    """Compute the mirrored output locations and sprite name for ``source``."""
    in_cfg = config.get("input", {})
    out_cfg = config.get("output", {})
    extension = in_cfg.get("extension", ".svg")

    relative_path = source.relative_to(input_root)
    target_dir = (output_root / relative_path).parent
    stem = strip_extension(source.name, extension)

    return SpriteJob(
        source=source,
        relative_path=relative_path,
        target_dir=target_dir,
        raster_path=target_dir / (stem + out_cfg.get("raster_extension", ".png")),
        sprite_path=target_dir / (stem + out_cfg.get("sprite_extension", ".puml")),
        identifier=sprite_identifier(relative_path, extension),
    )

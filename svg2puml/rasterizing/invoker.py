"""Run an external rasterizer on one SVG file."""
import subprocess
from pathlib import Path

from .backends import Rasterizer
from ..errors import RasterizerProcessError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class RasterizerInvoker:
    """Launches rasterizer processes and reports whether they succeeded."""

    def convert(self, rasterizer: Rasterizer, input_path: Path, output_path: Path) -> bool:
        """
        Render ``input_path`` to ``output_path`` with ``rasterizer``.

        The process's stderr is merged into stdout and every line is logged
        under the tool's name. Blocks until the process exits.

        Returns:
            True if the process exited with status 0.

        Raises:
            RasterizerProcessError: the process could not be started.
        """
        command = rasterizer.build_command(Path(input_path), Path(output_path))
        logger.debug(f"Running: {' '.join(command)}")

        try:
            process = subprocess.Popen(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
            )
        except OSError as e:
            raise RasterizerProcessError(
                f"Could not start {rasterizer.name}: {e}"
            ) from e

        with process:
            for line in process.stdout:
                line = line.rstrip()
                if line:
                    logger.info(f"{rasterizer.name}: {line}")
            exit_code = process.wait()

        if exit_code != 0:
            logger.debug(f"{rasterizer.name} exited with status {exit_code}")
        return exit_code == 0

"""Find which supported rasterizer is installed on this host."""
import subprocess
from typing import List, Optional

from .backends import DEFAULT_PREFERENCE, RASTERIZERS, Rasterizer, is_windows
from ..utils.logger import get_logger

logger = get_logger(__name__)


def is_command_available(command: str) -> bool:
    """Return True if ``command`` resolves to an executable on PATH."""
    probe = "where" if is_windows() else "which"
    try:
        result = subprocess.run(
            [probe, command],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as e:
        logger.debug(f"Could not run '{probe} {command}': {e}")
        return False
    return result.returncode == 0


class RasterizerLocator:
    """Select the first available rasterizer from a preference list."""

    def __init__(self, config: dict, probe=is_command_available):
        ras_cfg = config.get("rasterizers", {})
        self.preference: List[str] = list(ras_cfg.get("preference") or DEFAULT_PREFERENCE)
        self.probe = probe
        self._probed = False
        self._selected: Optional[Rasterizer] = None

    def locate(self) -> Optional[Rasterizer]:
        """
        Probe the host once and return the selected rasterizer.

        Returns:
            A Rasterizer instance, or None when no candidate is installed.
            The result is cached; later calls do not probe again.
        """
        if self._probed:
            return self._selected

        for name in self.preference:
            backend = RASTERIZERS.get(name)
            if backend is None:
                logger.warning(f"Ignoring unknown rasterizer in preference list: {name}")
                continue
            if self.probe(name):
                self._selected = backend()
                break
            logger.debug(f"Rasterizer not found: {name}")

        self._probed = True
        return self._selected

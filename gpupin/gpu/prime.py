from __future__ import annotations

"""PRIME offload eligibility.

Offload only makes sense on hybrid machines: more than one GPU, a Vulkan
launch, and an internal panel wired to the integrated GPU. The panel is found
through the DRM connector nodes (card0-eDP-1 and friends).
"""

import logging
import re
from pathlib import Path
from typing import Sequence

from ..errors import EligibilityCheckError
from .base import GPU
from .sysfs import DRM_ROOT

logger = logging.getLogger(__name__)

_PANEL_RE = re.compile(r"^card\d+-(eDP|LVDS|DSI)-\d+$")


def _internal_panel_connected(drm_root: Path) -> bool:
    if not drm_root.is_dir():
        raise EligibilityCheckError(f"prime: cannot inspect display connectors, {drm_root} is missing")

    try:
        entries = sorted(drm_root.iterdir())
    except OSError as e:
        raise EligibilityCheckError(f"prime: cannot list {drm_root}: {e}") from e

    for entry in entries:
        if not _PANEL_RE.match(entry.name):
            continue
        try:
            status = (entry / "status").read_text().strip()
        except OSError as e:
            raise EligibilityCheckError(f"prime: cannot read status of {entry.name}: {e}") from e
        logger.debug("%s: %s", entry.name, status)
        if status == "connected":
            return True
    return False


def prime_is_allowed(
    gpus: Sequence[GPU],
    is_vulkan: bool,
    drm_root: str | Path = DRM_ROOT,
) -> bool:
    """Return whether PRIME offload applies to this host and graphics API.

    Raises:
        EligibilityCheckError: the connector state could not be read.
    """
    if len(gpus) < 2:
        logger.debug("prime: %d gpu(s), nothing to offload to", len(gpus))
        return False

    if not is_vulkan:
        logger.debug("prime: not supported for the legacy graphics API")
        return False

    return _internal_panel_connected(Path(drm_root))

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import List, Optional

from .base import GPU
from .vendors import make_gpu

logger = logging.getLogger(__name__)

DRM_ROOT = "/sys/class/drm"

_CARD_RE = re.compile(r"^card(\d+)$")
_PCI_SLOT_RE = re.compile(r"^[0-9a-fA-F]{4}:[0-9a-fA-F]{2}:[0-9a-fA-F]{2}\.[0-7]$")


def _read_hex_id(path: Path) -> Optional[str]:
    # sysfs stores ids as "0x10de\n"
    try:
        return f"{int(path.read_text().strip(), 16):04x}"
    except (OSError, ValueError):
        return None


def _link_name(path: Path) -> str:
    if not path.exists():
        return ""
    return os.path.basename(os.path.realpath(path))


def _read_card(entry: Path, card: int) -> GPU:
    device = entry / "device"
    slot = _link_name(device)
    if not _PCI_SLOT_RE.match(slot):
        slot = ""
    return make_gpu(
        card=card,
        driver=_link_name(device / "driver"),
        pci_slot=slot.lower(),
        vendor_id=_read_hex_id(device / "vendor"),
        device_id=_read_hex_id(device / "device"),
    )


def system_gpus(drm_root: str | Path = DRM_ROOT) -> List[GPU]:
    """Enumerate DRM cards, ordered by card number.

    Connector nodes (card0-eDP-1, ...) and render nodes are skipped. A host
    without a DRM tree has no GPUs.
    """
    root = Path(drm_root)
    if not root.is_dir():
        logger.debug("no DRM tree at %s", root)
        return []

    cards = []
    for entry in root.iterdir():
        m = _CARD_RE.match(entry.name)
        if m:
            cards.append((int(m.group(1)), entry))
    cards.sort(key=lambda c: c[0])

    gpus = [_read_card(entry, card) for card, entry in cards]
    for gpu in gpus:
        logger.debug(
            "card%d: driver=%s slot=%s id=%s:%s",
            gpu.card,
            gpu.driver or "?",
            gpu.pci_slot or "?",
            gpu.vendor_id,
            gpu.device_id,
        )
    return gpus

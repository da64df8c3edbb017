from __future__ import annotations

"""CUDA device inventory.

Fallback inventory for hosts where /sys/class/drm is not exposed (containers
with only the NVIDIA runtime mounted). Devices come back in CUDA ordinal
order, which follows CUDA_DEVICE_ORDER; they carry no DRM card number (card=-1).
"""

import logging
from typing import List

from .base import GPU
from .vendors import NVIDIA_DRIVER, make_gpu

logger = logging.getLogger(__name__)

NVIDIA_VENDOR_ID = "10de"


def cuda_gpus() -> List[GPU]:
    """List CUDA devices via torch; no CUDA means no GPUs."""

    import torch  # type: ignore

    if not torch.cuda.is_available():
        logger.debug("torch reports no CUDA devices")
        return []

    gpus: List[GPU] = []
    for i in range(torch.cuda.device_count()):
        props = torch.cuda.get_device_properties(i)
        domain = getattr(props, "pci_domain_id", None)
        bus = getattr(props, "pci_bus_id", None)
        dev = getattr(props, "pci_device_id", None)
        slot = ""
        if domain is not None and bus is not None and dev is not None:
            slot = f"{domain:04x}:{bus:02x}:{dev:02x}.0"
        logger.debug("cuda:%d %s slot=%s", i, props.name, slot or "?")
        gpus.append(
            make_gpu(
                card=-1,
                driver=NVIDIA_DRIVER,
                pci_slot=slot,
                vendor_id=NVIDIA_VENDOR_ID,
            )
        )
    return gpus

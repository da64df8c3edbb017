from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from .base import GPU

NVIDIA_DRIVER = "nvidia"


@dataclass(frozen=True)
class NvidiaGPU(GPU):
    """GPU driven by the proprietary NVIDIA driver (render offload via GLVND/optimus layer)."""

    def forced_env(self) -> Dict[str, str]:
        env = self.device_env()
        env.update(
            {
                "__NV_PRIME_RENDER_OFFLOAD": "1",
                "__VK_LAYER_NV_optimus": "NVIDIA_only",
                "__GLX_VENDOR_LIBRARY_NAME": "nvidia",
            }
        )
        return env


@dataclass(frozen=True)
class MesaGPU(GPU):
    """GPU driven by a Mesa driver (amdgpu, radeon, i915, xe, nouveau, ...)."""

    def forced_env(self) -> Dict[str, str]:
        env = self.device_env()
        env.update(
            {
                "__NV_PRIME_RENDER_OFFLOAD": "0",
                "__VK_LAYER_NV_optimus": "non_NVIDIA_only",
                "__GLX_VENDOR_LIBRARY_NAME": "mesa",
            }
        )
        return env


def make_gpu(
    card: int,
    driver: str,
    pci_slot: str = "",
    vendor_id: Optional[str] = None,
    device_id: Optional[str] = None,
) -> GPU:
    """Build the descriptor variant matching the kernel driver."""

    cls = NvidiaGPU if driver == NVIDIA_DRIVER else MesaGPU
    return cls(
        card=card,
        driver=driver,
        pci_slot=pci_slot,
        vendor_id=vendor_id,
        device_id=device_id,
    )

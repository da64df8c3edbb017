from __future__ import annotations

"""GPU 描述（gpu.base）。

每个 GPU 描述对象只负责一件事：给出“强制使用这张卡”所需的环境变量。

- `forced_env()`：子类实现，返回该驱动族需要设置/覆盖的 key。
- `apply_env()`：纯函数，返回新的 env（原 env 不变），只增/改，不删不改名。

不同驱动族（NVIDIA 闭源驱动 / Mesa）各自拥有自己的 key 集合，见 vendors.py。
"""

from dataclasses import dataclass
from typing import Dict, Mapping, Optional


@dataclass(frozen=True)
class GPU:
    """一张显卡。

    Attributes:
        card: DRM 节点编号（/sys/class/drm/cardN 的 N）；没有 DRM 节点（例如 CUDA 列表）时为 -1。
        driver: 内核驱动名，例如 "nvidia"、"amdgpu"、"i915"。
        pci_slot: PCI 地址，例如 "0000:01:00.0"；未知时为空串。
        vendor_id: PCI vendor id（小写十六进制，不带 0x）；未知时为 None。
        device_id: PCI device id（同上）。
    """

    card: int
    driver: str
    pci_slot: str = ""
    vendor_id: Optional[str] = None
    device_id: Optional[str] = None

    @property
    def prime_tag(self) -> str:
        """Mesa DRI_PRIME 可接受的 PCI 标签，例如 "pci-0000_01_00_0"。"""

        return "pci-" + self.pci_slot.replace(":", "_").replace(".", "_")

    def device_env(self) -> Dict[str, str]:
        """按 PCI 信息指向这张卡的变量（Mesa DRI_PRIME 与 Vulkan device-select 层）。

        slot 未知时 DRI_PRIME 退回 "vendor:device" 形式；两者都未知时不设置。
        """

        env: Dict[str, str] = {}
        ids = f"{self.vendor_id}:{self.device_id}" if self.vendor_id and self.device_id else ""
        if self.pci_slot:
            env["DRI_PRIME"] = self.prime_tag
        elif ids:
            env["DRI_PRIME"] = ids
        if ids:
            env["MESA_VK_DEVICE_SELECT"] = ids
        return env

    def forced_env(self) -> Dict[str, str]:
        raise NotImplementedError

    def apply_env(self, env: Mapping[str, str]) -> Dict[str, str]:
        """返回设置了本卡强制变量的新 env。

        强制变量对其触及的 key 具有最终决定权；其余 key 原样保留。
        """

        out = dict(env)
        out.update(self.forced_env())
        return out

from __future__ import annotations

"""选卡与环境变量注入（gpu.pick）。

`handle_gpu` 是一个无状态的单次决策函数：
- 输入：GPU 选择描述、基础 env、是否为 Vulkan（具备 offload 能力的 API）。
- 输出：新的 env；或抛出 `DeviceNotFoundError` / 透传 eligibility 检查的异常。

约定：
- id == -1 时不枚举 GPU，直接返回 env 的副本。
- 请求 PRIME 但主机不满足条件时不是错误，照常用默认设备启动。
- 调用方传入的 env 永远不会被原地修改。
"""

import logging
from typing import Callable, Dict, Mapping, Sequence

from ..config import GpuTarget
from ..errors import DeviceNotFoundError
from .base import GPU
from .prime import prime_is_allowed
from .sysfs import system_gpus

logger = logging.getLogger(__name__)

InventoryProvider = Callable[[], Sequence[GPU]]
OffloadChecker = Callable[[Sequence[GPU], bool], bool]


def handle_gpu(
    target: GpuTarget,
    env: Mapping[str, str],
    is_vulkan: bool,
    *,
    inventory: InventoryProvider = system_gpus,
    offload_check: OffloadChecker = prime_is_allowed,
) -> Dict[str, str]:
    """按 target 选择 GPU，并返回注入了该卡强制变量的新 env。

    Args:
        target: GPU 选择描述。
        env: 基础 env（默认表 + 用户覆盖）。
        is_vulkan: 本次启动是否走 Vulkan。
        inventory: GPU 列表提供者，仅在需要选卡时调用一次。
        offload_check: PRIME 资格检查；其异常原样向上抛出。

    Raises:
        DeviceNotFoundError: target.id 在 GPU 列表中不存在。
    """

    if target.id == -1:
        return dict(env)

    gpus = list(inventory())

    if target.prime and not offload_check(gpus, is_vulkan):
        logger.info("PRIME offload is not supported on this host, using the default GPU")
        return dict(env)

    if not 0 <= target.id < len(gpus):
        raise DeviceNotFoundError(target.id, len(gpus))

    gpu = gpus[target.id]
    logger.info(
        "using gpu %d (%s, %s)",
        target.id,
        f"card{gpu.card}" if gpu.card >= 0 else gpu.pci_slot or "no drm node",
        gpu.driver or "unknown driver",
    )

    return gpu.apply_env(env)

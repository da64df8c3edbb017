from __future__ import annotations

"""环境变量配置（env）。

该模块负责组装交给启动器的最终 env：

1) `default_env`：默认表（Wine/DXVK/Mesa/NVIDIA 相关）。
2) `base_env`：默认表 + 用户在 `LaunchConfig.env` 中的覆盖（用户优先）。
3) `launch_env`：在 base_env 之上按 `LaunchConfig.gpu` 选卡注入（选卡强制变量优先）。

注意：这里只构造 dict，不写 os.environ，也不启动子进程。
"""

import os
import sys
from typing import Dict, Optional

from .config import Directories, LaunchConfig
from .gpu.pick import InventoryProvider, OffloadChecker, handle_gpu
from .gpu.prime import prime_is_allowed
from .gpu.sysfs import system_gpus


def default_env(dirs: Directories, platform: Optional[str] = None) -> Dict[str, str]:
    """返回默认 env 表。

    Args:
        dirs: 应用目录（Wine prefix 与 DXVK state cache 位于其中）。
        platform: 平台名，默认 `sys.platform`；FreeBSD 上使用 32 位 prefix。
    """

    platform = sys.platform if platform is None else platform

    env = {
        "WINEPREFIX": dirs.pfx,
        "WINEARCH": "win64",
        "WINEDEBUG": "-all",
        "WINEDLLOVERRIDES": "dxdiagn=d;winemenubuilder.exe=d;",
        "DXVK_LOG_LEVEL": "warn",
        "DXVK_LOG_PATH": "none",
        "DXVK_STATE_CACHE_PATH": os.path.join(dirs.cache, "dxvk"),
        # 以下预期由用户按自己的机器覆盖
        "MESA_GL_VERSION_OVERRIDE": "4.4",
        "__GL_THREADED_OPTIMIZATIONS": "1",
        "DRI_PRIME": "1",
        "__NV_PRIME_RENDER_OFFLOAD": "1",
        "__VK_LAYER_NV_optimus": "NVIDIA_only",
        "__GLX_VENDOR_LIBRARY_NAME": "nvidia",
    }

    if platform.startswith("freebsd"):
        env["WINEARCH"] = "win32"
        env["WINE_NO_WOW64"] = "1"

    return env


def base_env(cfg: LaunchConfig, dirs: Directories, platform: Optional[str] = None) -> Dict[str, str]:
    """默认表叠加用户覆盖。"""

    env = default_env(dirs, platform)
    env.update(cfg.env)
    return env


def launch_env(
    cfg: LaunchConfig,
    dirs: Directories,
    *,
    platform: Optional[str] = None,
    inventory: InventoryProvider = system_gpus,
    offload_check: OffloadChecker = prime_is_allowed,
) -> Dict[str, str]:
    """构造交给启动器的最终 env。

    Raises:
        DeviceNotFoundError: 配置选择的 GPU 不存在，启动应当中止。
        EligibilityCheckError: 请求了 PRIME 但无法判断主机是否支持。
    """

    return handle_gpu(
        cfg.gpu,
        base_env(cfg, dirs, platform),
        cfg.uses_vulkan,
        inventory=inventory,
        offload_check=offload_check,
    )

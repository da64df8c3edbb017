"""gpupin：多 GPU 主机上为 Wine 启动选卡并生成 env。

这里提供一套“可组合”的最小抽象：
- config：配置对象与目录推导
- env：默认 env、用户覆盖与最终 launch env
- errors：错误类型
- gpu：GPU 描述、GPU 列表、PRIME 资格检查与选卡
"""

from .config import Directories, GpuTarget, LaunchConfig, default_dirs, ensure_dirs
from .env import base_env, default_env, launch_env
from .errors import ConfigError, DeviceNotFoundError, EligibilityCheckError, GpuPinError
from .gpu import handle_gpu

__all__ = [
    "ConfigError",
    "DeviceNotFoundError",
    "Directories",
    "EligibilityCheckError",
    "GpuPinError",
    "GpuTarget",
    "LaunchConfig",
    "base_env",
    "default_dirs",
    "default_env",
    "ensure_dirs",
    "handle_gpu",
    "launch_env",
]

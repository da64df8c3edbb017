"""GPU 相关（gpu）。

- base/vendors：GPU 描述与各驱动族的强制变量
- sysfs/cuda：GPU 列表提供者
- prime：PRIME offload 资格检查
- pick：选卡并注入 env
"""

from .base import GPU
from .cuda import cuda_gpus
from .pick import handle_gpu
from .prime import prime_is_allowed
from .sysfs import system_gpus
from .vendors import MesaGPU, NvidiaGPU, make_gpu

__all__ = [
    "GPU",
    "MesaGPU",
    "NvidiaGPU",
    "cuda_gpus",
    "handle_gpu",
    "make_gpu",
    "prime_is_allowed",
    "system_gpus",
]

from __future__ import annotations

"""配置模块（config）。

这里集中定义一组“纯数据”的配置对象，用于描述一次 Wine 启动需要的参数。

设计目标：
- 配置与逻辑解耦：解析/选卡逻辑只依赖这些配置对象，而不是进程级全局单例。
- 显式传参：调用方构造配置对象并传给 `gpupin.env.launch_env`，本包不读写任何配置文件。

说明：
- 这些 dataclass 均为 frozen（不可变），避免运行中被意外修改导致行为漂移。
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Optional

from .errors import ConfigError

RENDERERS = ("OpenGL", "D3D11FL10", "D3D11", "Vulkan")


@dataclass(frozen=True)
class GpuTarget:
    """GPU 选择描述。

    Attributes:
        id: 目标 GPU 在系统 GPU 列表中的下标；-1 表示不指定，走默认渲染路径。
        prime: 是否请求 PRIME render offload。
    """

    id: int = -1
    prime: bool = False


@dataclass(frozen=True)
class Directories:
    """应用目录集合。

    Attributes:
        cache: 缓存根目录（DXVK state cache 等）。
        config: 配置根目录。
        data: 数据根目录。
        pfx: Wine prefix 目录。
        log: 日志目录。
    """

    cache: str
    config: str
    data: str
    pfx: str
    log: str


def default_dirs(
    environ: Optional[Mapping[str, str]] = None,
    home: Optional[str] = None,
    app_name: str = "gpupin",
) -> Directories:
    """按 XDG 约定推导目录。

    已设置且非空的 XDG_* 变量优先；否则退回到 home 下的默认位置。

    Args:
        environ: 环境变量来源，默认 `os.environ`。
        home: 用户主目录，默认 `Path.home()`。
        app_name: 目录名。
    """

    environ = os.environ if environ is None else environ
    home = str(Path.home()) if home is None else home

    xdg = {
        "XDG_CACHE_HOME": os.path.join(home, ".cache"),
        "XDG_CONFIG_HOME": os.path.join(home, ".config"),
        "XDG_DATA_HOME": os.path.join(home, ".local", "share"),
    }
    for name in xdg:
        value = environ.get(name, "")
        if value:
            xdg[name] = value

    cache = os.path.join(xdg["XDG_CACHE_HOME"], app_name)
    data = os.path.join(xdg["XDG_DATA_HOME"], app_name)
    return Directories(
        cache=cache,
        config=os.path.join(xdg["XDG_CONFIG_HOME"], app_name),
        data=data,
        pfx=os.path.join(data, "pfx"),
        log=os.path.join(cache, "logs"),
    )


def ensure_dirs(dirs: Directories, mode: int = 0o755) -> None:
    """创建 log 与 pfx 目录（其余目录是它们的父目录，会被一并创建）。"""

    for path in (dirs.log, dirs.pfx):
        os.makedirs(path, mode=mode, exist_ok=True)


@dataclass(frozen=True)
class LaunchConfig:
    """一次启动的配置。

    Attributes:
        renderer: Direct3D/OpenGL/Vulkan 渲染器名，取值见 `RENDERERS`。
        dxvk: 是否通过 DXVK 把 Direct3D 翻译为 Vulkan。
        env: 用户自定义环境变量，覆盖默认表。
        gpu: GPU 选择描述。
    """

    renderer: str = "D3D11"
    dxvk: bool = True
    env: Dict[str, str] = field(default_factory=dict)
    gpu: GpuTarget = field(default_factory=GpuTarget)

    def __post_init__(self) -> None:
        if self.renderer not in RENDERERS:
            raise ConfigError(
                f"unknown renderer {self.renderer!r}, expected one of {', '.join(RENDERERS)}"
            )

    @property
    def uses_vulkan(self) -> bool:
        """本次启动最终是否走 Vulkan（即是否具备 offload 能力的图形 API）。"""

        if self.renderer == "Vulkan":
            return True
        return self.renderer.startswith("D3D") and self.dxvk

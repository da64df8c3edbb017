from __future__ import annotations

"""选卡示例（基于 gpupin 抽象）。

这个文件刻意保持“只做组装，不做实现细节”：
- 用 config 对象描述目录 / 渲染器 / 用户 env / GPU 选择
- 用 launch_env 得到交给启动器的最终 env
- 打印与默认表不同的那部分变量

如果你的机器只有一张卡：把 GPU 改成 GpuTarget() 即可（id=-1，不枚举设备）。
"""

from gpupin.config import GpuTarget, LaunchConfig, default_dirs, ensure_dirs
from gpupin.env import base_env, launch_env


# ===== 示例配置（无 argparse） =====
DIRS = default_dirs()
LAUNCH = LaunchConfig(
    renderer="D3D11",
    dxvk=True,
    env={"WINEDEBUG": "fixme-all"},
    gpu=GpuTarget(id=1, prime=True),
)


def main() -> None:
    """示例入口：准备目录，解析 env 并打印差异。"""

    # 1) 目录需要先存在（Wine prefix、日志）。
    ensure_dirs(DIRS)

    # 2) 默认表 + 用户覆盖，作为对比基线。
    before = base_env(LAUNCH, DIRS)

    # 3) 选卡注入。
    after = launch_env(LAUNCH, DIRS)

    print(f"=== renderer={LAUNCH.renderer} vulkan={LAUNCH.uses_vulkan} gpu={LAUNCH.gpu} ===")
    for key in sorted(after):
        mark = "*" if before.get(key) != after[key] else " "
        print(f"{mark} {key}={after[key]}")


if __name__ == "__main__":
    main()

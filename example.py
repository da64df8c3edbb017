import argparse
import logging

from gpupin.config import GpuTarget, LaunchConfig, RENDERERS, default_dirs
from gpupin.env import launch_env
from gpupin.errors import GpuPinError
from gpupin.gpu import cuda_gpus, system_gpus


def _print_gpus(gpus) -> None:
    if not gpus:
        print("[GPU] no GPUs detected")
        return
    for i, gpu in enumerate(gpus):
        ids = f"{gpu.vendor_id}:{gpu.device_id}" if gpu.vendor_id else "?"
        node = f"card{gpu.card}" if gpu.card >= 0 else "-"
        print(f"[GPU] {i}\t{node}\t{gpu.driver or '?'}\t{gpu.pci_slot or '?'}\t{ids}")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Print the environment a Wine launch would get for a GPU selection"
    )
    parser.add_argument(
        "--gpu",
        type=int,
        default=-1,
        help="GPU index as listed by --list (-1 keeps the default GPU).",
    )
    parser.add_argument(
        "--prime",
        action="store_true",
        help="Request PRIME render offload.",
    )
    parser.add_argument(
        "--renderer",
        default="D3D11",
        choices=RENDERERS,
    )
    parser.add_argument(
        "--no-dxvk",
        action="store_true",
        help="Use wined3d instead of DXVK for Direct3D.",
    )
    parser.add_argument(
        "--cuda",
        action="store_true",
        help="Enumerate GPUs through torch.cuda instead of /sys/class/drm.",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Only list detected GPUs.",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    inventory = cuda_gpus if args.cuda else system_gpus
    if args.list:
        _print_gpus(inventory())
        return 0

    cfg = LaunchConfig(
        renderer=args.renderer,
        dxvk=not args.no_dxvk,
        gpu=GpuTarget(id=args.gpu, prime=args.prime),
    )
    try:
        env = launch_env(cfg, default_dirs(), inventory=inventory)
    except GpuPinError as e:
        print(f"[ERROR] {e}")
        return 1

    for key in sorted(env):
        print(f"{key}={env[key]}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

import pytest

from gpupin.errors import EligibilityCheckError
from gpupin.gpu.prime import prime_is_allowed
from gpupin.gpu.sysfs import system_gpus
from gpupin.gpu.vendors import MesaGPU, NvidiaGPU


def _add_card(root, card, slot, driver, vendor, device):
    dev = root / "devices" / slot
    dev.mkdir(parents=True)
    (dev / "vendor").write_text(f"0x{vendor}\n")
    (dev / "device").write_text(f"0x{device}\n")
    drv = root / "drivers" / driver
    drv.mkdir(parents=True, exist_ok=True)
    (dev / "driver").symlink_to(drv)

    node = root / "drm" / f"card{card}"
    node.mkdir(parents=True)
    (node / "device").symlink_to(dev)


def _add_connector(root, name, status):
    node = root / "drm" / name
    node.mkdir(parents=True)
    (node / "status").write_text(status + "\n")


@pytest.fixture
def hybrid(tmp_path):
    _add_card(tmp_path, 0, "0000:00:02.0", "i915", "8086", "9a49")
    _add_card(tmp_path, 1, "0000:01:00.0", "nvidia", "10de", "25A2")
    _add_connector(tmp_path, "card0-eDP-1", "connected")
    _add_connector(tmp_path, "card0-HDMI-A-1", "disconnected")
    (tmp_path / "drm" / "renderD128").mkdir()
    return tmp_path


def test_system_gpus(hybrid):
    gpus = system_gpus(hybrid / "drm")

    assert gpus == [
        MesaGPU(card=0, driver="i915", pci_slot="0000:00:02.0", vendor_id="8086", device_id="9a49"),
        NvidiaGPU(card=1, driver="nvidia", pci_slot="0000:01:00.0", vendor_id="10de", device_id="25a2"),
    ]


def test_system_gpus_ordered_by_card_number(tmp_path):
    _add_card(tmp_path, 10, "0000:0a:00.0", "amdgpu", "1002", "73bf")
    _add_card(tmp_path, 2, "0000:02:00.0", "amdgpu", "1002", "744c")

    assert [gpu.card for gpu in system_gpus(tmp_path / "drm")] == [2, 10]


def test_system_gpus_missing_attributes(tmp_path):
    (tmp_path / "drm" / "card0").mkdir(parents=True)

    assert system_gpus(tmp_path / "drm") == [MesaGPU(card=0, driver="")]


def test_system_gpus_without_drm(tmp_path):
    assert system_gpus(tmp_path / "nope") == []


def test_prime_allowed_on_hybrid_laptop(hybrid):
    gpus = system_gpus(hybrid / "drm")
    assert prime_is_allowed(gpus, True, hybrid / "drm") is True


def test_prime_declined_for_legacy_api(hybrid):
    gpus = system_gpus(hybrid / "drm")
    assert prime_is_allowed(gpus, False, hybrid / "drm") is False


def test_prime_declined_for_single_gpu(tmp_path):
    gpus = [MesaGPU(card=0, driver="amdgpu")]
    # no DRM tree needed, the gpu count already decides
    assert prime_is_allowed(gpus, True, tmp_path / "nope") is False


def test_prime_declined_without_internal_panel(tmp_path):
    _add_card(tmp_path, 0, "0000:00:02.0", "i915", "8086", "9a49")
    _add_card(tmp_path, 1, "0000:01:00.0", "nvidia", "10de", "25a2")
    _add_connector(tmp_path, "card0-DP-1", "connected")
    _add_connector(tmp_path, "card0-eDP-1", "disconnected")

    gpus = system_gpus(tmp_path / "drm")
    assert prime_is_allowed(gpus, True, tmp_path / "drm") is False


def test_prime_check_fails_without_drm(tmp_path):
    gpus = [MesaGPU(card=0, driver="i915"), NvidiaGPU(card=1, driver="nvidia")]
    with pytest.raises(EligibilityCheckError):
        prime_is_allowed(gpus, True, tmp_path / "nope")


def test_prime_check_fails_on_unreadable_status(tmp_path):
    (tmp_path / "drm" / "card0-eDP-1").mkdir(parents=True)
    gpus = [MesaGPU(card=0, driver="i915"), NvidiaGPU(card=1, driver="nvidia")]
    with pytest.raises(EligibilityCheckError):
        prime_is_allowed(gpus, True, tmp_path / "drm")

from types import SimpleNamespace

import pytest

torch = pytest.importorskip("torch")

from gpupin.gpu.cuda import cuda_gpus  # noqa: E402
from gpupin.gpu.vendors import NvidiaGPU  # noqa: E402


def test_no_cuda(monkeypatch):
    monkeypatch.setattr(torch.cuda, "is_available", lambda: False)
    assert cuda_gpus() == []


def test_cuda_devices(monkeypatch):
    props = [
        SimpleNamespace(name="RTX A", pci_domain_id=0, pci_bus_id=1, pci_device_id=0),
        SimpleNamespace(name="RTX B"),
    ]
    monkeypatch.setattr(torch.cuda, "is_available", lambda: True)
    monkeypatch.setattr(torch.cuda, "device_count", lambda: len(props))
    monkeypatch.setattr(torch.cuda, "get_device_properties", lambda i: props[i])

    assert cuda_gpus() == [
        NvidiaGPU(card=-1, driver="nvidia", pci_slot="0000:01:00.0", vendor_id="10de"),
        NvidiaGPU(card=-1, driver="nvidia", vendor_id="10de"),
    ]

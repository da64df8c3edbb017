from __future__ import annotations


class GpuPinError(Exception):
    pass


class ConfigError(GpuPinError):
    pass


class EligibilityCheckError(GpuPinError):
    """PRIME eligibility could not be determined on this host."""


class DeviceNotFoundError(GpuPinError):
    """The selected GPU index has no entry in the inventory."""

    def __init__(self, index: int, count: int):
        super().__init__(f"gpu not found: index {index}, {count} gpu(s) detected")
        self.index = index
        self.count = count

"""
Shared compute infrastructure for gaussolve.

Numeric support shared by the elimination and substitution backends.
Backends themselves live in {subpackage}/backends/.

Submodules:
    device: Hardware detection and device selection
    timing: Execution timing utilities
    precision: Machine epsilon, norms, pivot thresholds
    tolerances: Default pivot tolerances and comparison tiers
"""

from gaussolve.core.compute.device import (
    DeviceInfo,
    detect_gpu,
    get_cpu_info,
    select_device,
)
from gaussolve.core.compute.timing import Timer

__all__ = [
    # Device detection
    "DeviceInfo",
    "detect_gpu",
    "get_cpu_info",
    "select_device",
    # Timing
    "Timer",
]

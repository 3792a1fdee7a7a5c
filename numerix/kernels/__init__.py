"""
Numerical kernel implementations.

Kernels satisfy numerix.core.protocols.Kernel. The dispatch layer obtains
one with get_kernel() for every call; kernels are stateless, so a single
shared instance serves all threads.

Available kernels:
    cpu: NumPy ufuncs + SciPy BLAS
"""

from typing import Literal

from numerix.core.exceptions import ValidationError
from numerix.kernels.cpu import CPUKernel

KernelChoice = Literal['auto', 'cpu']

_CPU_KERNEL = CPUKernel()


def get_kernel(kernel: KernelChoice = 'auto') -> CPUKernel:
    """
    Select a kernel based on preference.

    Args:
        kernel: 'auto' or 'cpu'. Both resolve to the CPU kernel; there is no
            accelerator kernel.

    Raises:
        ValidationError: If the kernel name is unknown
    """
    if kernel in ('auto', 'cpu'):
        return _CPU_KERNEL
    raise ValidationError(f"Unknown kernel: {kernel!r}")


__all__ = [
    "CPUKernel",
    "KernelChoice",
    "get_kernel",
]

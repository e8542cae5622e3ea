"""
Backend selection and management.

Provides a unified interface to the objects that carry out the linear algebra.
"""

import warnings

from .base import BackendBase, LassoResult

# Try importing CPU backend (always available)
try:
    from .cpu_fp64_backend import CPUBackendFP64
    CPU_AVAILABLE = True
except ImportError:
    CPU_AVAILABLE = False
    warnings.warn("CPU backend unavailable - installation error!")


def get_backend(backend='auto') -> BackendBase:
    """
    Get computational backend.

    Parameters
    ----------
    backend : str or BackendBase
        Backend selection:
        - 'auto': Best available backend (currently always CPU)
        - 'cpu': CPU with NumPy/SciPy (FP64)
        - a BackendBase instance is returned unchanged

    Returns
    -------
    BackendBase
        Backend instance

    Examples
    --------
    >>> backend = get_backend('auto')
    >>> backend.name
    'cpu_fp64'
    """
    if isinstance(backend, BackendBase):
        return backend

    if backend in ('auto', 'cpu'):
        if not CPU_AVAILABLE:
            raise RuntimeError("CPU backend unavailable!")
        return CPUBackendFP64()

    raise ValueError(
        f"Unknown backend: '{backend}'\n"
        f"Valid options: 'auto', 'cpu'"
    )


def list_available_backends() -> list:
    """List names of available backends."""
    backends = []
    if CPU_AVAILABLE:
        backends.append('cpu')
    return backends


def print_backend_info():
    """Print detailed backend information (diagnostic)."""
    print("PyShrinkage Backend Status")
    print("=" * 50)
    print(f"\nAvailable Backends:")
    print(f"  CPU (FP64): {'✓' if CPU_AVAILABLE else '✗'} - Ridge (normal equations), Lasso (coordinate descent)")

    print(f"\nRecommended Backend:")
    try:
        backend = get_backend('auto')
        print(f"  {backend.name}")
        for key, value in backend.get_device_info().items():
            print(f"    {key}: {value}")
    except RuntimeError as e:
        print(f"  Error: {e}")


__all__ = [
    'get_backend',
    'list_available_backends',
    'print_backend_info',
    'BackendBase',
    'LassoResult',
    'CPU_AVAILABLE',
]


if __name__ == "__main__":
    print_backend_info()

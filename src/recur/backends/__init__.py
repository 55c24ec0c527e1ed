"""Backend implementations for occurrence exports."""

from typing import Literal

from recur.backends.base import Backend
from recur.backends.pandas import PandasBackend
from recur.backends.polars import PolarsBackend

BackendName = Literal["pandas", "polars"]


def get_backend(backend: BackendName) -> Backend:
    """Return the backend instance registered under ``backend``."""
    if backend == "pandas":
        return PandasBackend()
    elif backend == "polars":
        return PolarsBackend()
    raise ValueError(f"Unknown backend: {backend}")


__all__ = ["Backend", "BackendName", "PandasBackend", "PolarsBackend", "get_backend"]

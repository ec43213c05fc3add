from __future__ import annotations

import asyncio
from typing import Any

import numpy as np

from tensorscript.utils.nn.backend import Backend, infer_backend


class Prediction:
    """
    Handle around the raw output of `BaseModel.calculate`.

    Description:
        Wraps a backend tensor (torch / tensorflow), a numpy array or a nested \
        Python sequence and exposes an asynchronous `data()` that yields the \
        values as a flat, row-major Python list.

    """

    def __init__(self, values: Any):
        self.values = values

    def __repr__(self) -> str:
        return f"Prediction(backend={infer_backend(self.values)!r})"

    async def data(self) -> list[Any]:
        """
        Returns the flat, row-major prediction values.

        Tensor-to-host conversion runs in a worker thread so the event loop is not blocked.

        Returns:
            list[float | int]: Prediction values as Python scalars.

        """
        return await asyncio.to_thread(self.data_sync)

    def data_sync(self) -> list[Any]:
        """Synchronous counterpart of `data()`."""
        return to_numpy(self.values).reshape(-1).tolist()


def to_numpy(values: Any) -> np.ndarray:
    """Converts a tensor-like object into a numpy array."""
    backend = infer_backend(values)
    if backend == Backend.TORCH:
        return values.detach().cpu().numpy()
    if backend == Backend.TENSORFLOW:
        return values.numpy()
    return np.asarray(values)


def as_prediction(obj: Any) -> Any:
    """
    Returns `obj` if it already exposes a callable `data()`, otherwise wraps it in a `Prediction`.

    Note that `torch.Tensor.data` and `np.ndarray.data` are attributes, not methods, \
    so raw tensors and arrays are always wrapped.
    """
    if isinstance(obj, Prediction) or callable(getattr(obj, "data", None)):
        return obj
    return Prediction(obj)

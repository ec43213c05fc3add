from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from tensorscript.logger import logger
from tensorscript.utils.optional_imports import (
    check_sklearn,
    check_tensorflow,
    check_torch,
    ensure_sklearn,
    ensure_tensorflow,
    ensure_torch,
)

if TYPE_CHECKING:
    from types import ModuleType


class Backend(str, Enum):
    """
    Enum representing supported tensor-computation backends in TensorScript.

    Attributes:
        TORCH (str): PyTorch backend (torch.nn.Module, torch.Tensor).
        TENSORFLOW (str): TensorFlow backend (tf.keras.Model, tf.Tensor).
        SCIKIT (str): scikit-learn backend (BaseEstimator).
        NONE (str): No backend detected or unsupported object type.

    """

    TORCH = "torch"
    TENSORFLOW = "tensorflow"
    SCIKIT = "scikit"
    NONE = "none"

    def __repr__(self) -> str:
        return self.value


def normalize_backend(value: str | Backend) -> Backend:
    """
    Convert a backend name or alias into a `Backend` member.

    Accepted aliases are case-insensitive and may carry a ``"backend."`` prefix:
    ``"pytorch"`` for TORCH, ``"tf"``/``"keras"`` for TENSORFLOW and ``"sklearn"``
    for SCIKIT.

    Raises:
        ValueError: If the value does not name a known backend.

    """
    if isinstance(value, Backend):
        return value
    if isinstance(value, str):
        value = value.lower().strip().removeprefix("backend.")
        if value in ["torch", "pytorch"]:
            return Backend.TORCH
        if value in ["tensorflow", "tf", "keras"]:
            return Backend.TENSORFLOW
        if value in ["scikit", "sklearn"]:
            return Backend.SCIKIT
        return Backend(value)
    msg = f"Unsupported Backend value: {value}"
    raise ValueError(msg)


def resolve_backend_module(backend: str | Backend) -> ModuleType:
    """
    Import and return the library module that implements `backend`.

    Args:
        backend (str | Backend): Backend to resolve.

    Returns:
        ModuleType: The `torch`, `tensorflow` or `sklearn` module.

    Raises:
        ImportError: If the backend library is not installed.
        ValueError: If `backend` is `Backend.NONE`.

    """
    backend = normalize_backend(backend)
    logger.debug("Resolving module for backend '%s'", backend.value)
    if backend == Backend.TORCH:
        return ensure_torch()
    if backend == Backend.TENSORFLOW:
        return ensure_tensorflow()
    if backend == Backend.SCIKIT:
        return ensure_sklearn()
    msg = f"Backend '{backend.value}' has no associated module."
    raise ValueError(msg)


def infer_backend(obj_or_cls: Any) -> Backend:
    """
    Infers the backend associated with a given object or class.

    Supports inference from:
    - Data objects (e.g., torch.Tensor, tf.Tensor)
    - Model instances and classes

    Args:
        obj_or_cls (Any): The object/class to inspect.

    Returns:
        Backend: The inferred backend enum value.

    """

    def _safe_issubclass(obj_or_cls, bases):
        try:
            return isinstance(obj_or_cls, type) and issubclass(obj_or_cls, bases)
        except TypeError:
            return False

    torch = check_torch()
    tf = check_tensorflow()
    sklearn = check_sklearn()

    # ================================================
    # PyTorch
    # ================================================
    if torch is not None and (
        isinstance(obj_or_cls, (torch.Tensor, torch.nn.Module)) or _safe_issubclass(obj_or_cls, torch.nn.Module)
    ):
        return Backend.TORCH

    # ================================================
    # Tensorflow
    # ================================================
    if tf is not None and (
        isinstance(obj_or_cls, (tf.Tensor, tf.Variable, tf.keras.Model)) or _safe_issubclass(obj_or_cls, tf.keras.Model)
    ):
        return Backend.TENSORFLOW

    # ================================================
    # Sklearn
    # ================================================
    if sklearn is not None and (
        isinstance(obj_or_cls, sklearn.base.BaseEstimator) or _safe_issubclass(obj_or_cls, sklearn.base.BaseEstimator)
    ):
        return Backend.SCIKIT

    return Backend.NONE

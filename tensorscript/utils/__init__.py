from .error_handling import ErrorMode, InvalidTypeError, ShapeMismatchError
from .formatting import normal_round
from .nn.backend import Backend, infer_backend, normalize_backend

__all__ = [
    "Backend",
    "ErrorMode",
    "InvalidTypeError",
    "ShapeMismatchError",
    "infer_backend",
    "normal_round",
    "normalize_backend",
]

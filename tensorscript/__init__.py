from tensorscript.core.models.base_model import BaseModel
from tensorscript.core.models.predict_options import PredictOptions
from tensorscript.core.models.prediction import Prediction
from tensorscript.logger import set_logging_level
from tensorscript.utils.data.shape_utils import flatten, get_input_shape, reshape
from tensorscript.utils.error_handling import InvalidTypeError, ShapeMismatchError
from tensorscript.utils.nn.backend import Backend

__version__ = "0.1.0"

__all__ = [
    "Backend",
    "BaseModel",
    "InvalidTypeError",
    "PredictOptions",
    "Prediction",
    "ShapeMismatchError",
    "flatten",
    "get_input_shape",
    "reshape",
    "set_logging_level",
]

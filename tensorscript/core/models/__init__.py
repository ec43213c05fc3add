from .base_model import BaseModel
from .predict_options import PredictOptions
from .prediction import Prediction, as_prediction

__all__ = [
    "BaseModel",
    "PredictOptions",
    "Prediction",
    "as_prediction",
]

from __future__ import annotations

import inspect
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from tensorscript.core.io.protocols import Configurable
from tensorscript.core.models.predict_options import PredictOptions
from tensorscript.core.models.prediction import as_prediction
from tensorscript.logger import logger
from tensorscript.utils.data.shape_utils import ensure_matrix, get_input_shape, reshape
from tensorscript.utils.formatting import normal_round
from tensorscript.utils.nn.backend import Backend, normalize_backend, resolve_backend_module
from tensorscript.utils.optional_imports import ensure_joblib

if TYPE_CHECKING:
    from types import ModuleType


class BaseModel(Configurable):
    """
    Base class for TensorScript models.

    Description:
        Concrete models (e.g., regressions, classifiers) subclass `BaseModel` and \
        override `train` and `calculate`. The base class stores hyperparameters, \
        holds the injected tensor backend, and provides a default asynchronous \
        `predict` that turns the flat output of `calculate` back into a matrix.

    Attributes:
        settings (dict[str, Any]): Model hyperparameters.
        model (Any): Backend model handle, None until trained or loaded.
        y_shape (tuple[int, int] | None): Shape of the training targets, set by \
            subclasses in `train`. Used as the output width in `predict`.

    """

    get_input_shape = staticmethod(get_input_shape)
    reshape = staticmethod(reshape)

    def __init__(
        self,
        settings: Mapping[str, Any] | None = None,
        *,
        backend: str | Backend = Backend.TENSORFLOW,
        backend_module: ModuleType | Any | None = None,
    ):
        """
        Initialize the model.

        Args:
            settings (Mapping[str, Any], optional): Model hyperparameters. Copied on init.
            backend (str | Backend, optional): Tensor backend used by this model. \
                Defaults to `Backend.TENSORFLOW`.
            backend_module (ModuleType, optional): Explicit backend library handle \
                (e.g., a custom `tensorflow` build). If omitted, the library for \
                `backend` is imported on first use.

        """
        self.settings: dict[str, Any] = dict(settings or {})
        self._backend = normalize_backend(backend)
        self._backend_module = backend_module
        self.model: Any = None
        self.y_shape: tuple[int, int] | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(settings={self.settings!r}, backend={self._backend!r})"

    # ================================================
    # Properties
    # ================================================
    @property
    def backend(self) -> Backend:
        return self._backend

    @property
    def backend_module(self) -> ModuleType | Any:
        """The backend library (e.g., `tensorflow`), imported lazily if not injected."""
        if self._backend_module is None:
            self._backend_module = resolve_backend_module(self._backend)
        return self._backend_module

    # ================================================
    # Model contract
    # ================================================
    def train(self, x_matrix, y_matrix):
        """
        Trains the backend model. Must be implemented by subclasses.

        Args:
            x_matrix (Sequence[Sequence[float]]): Independent variables.
            y_matrix (Sequence[Sequence[float]]): Dependent variables.

        Returns:
            Any: The trained backend model.

        """
        raise NotImplementedError("train method is not implemented")

    def calculate(self, matrix):
        """
        Predicts new dependent variables. Must be implemented by subclasses.

        Args:
            matrix (Sequence[Sequence[float]]): New independent variables.

        Returns:
            Any: An object with a `data()` method yielding flat values, or a raw \
                tensor / array that will be wrapped in a `Prediction`.

        """
        raise NotImplementedError("calculate method is not implemented")

    async def predict(
        self,
        x_matrix,
        options: PredictOptions | Mapping[str, Any] | None = None,
    ) -> list[Any]:
        """
        Returns prediction values from the backend model.

        Args:
            x_matrix (Sequence[Sequence[float]] | Sequence[float]): New independent \
                variables. A flat sequence is treated as a single row.
            options (PredictOptions | Mapping[str, Any], optional): Output options. \
                Defaults to `json=True, probability=True`.

        Returns:
            list: A `(n_rows, n_outputs)` nested list, or the flat values if \
                `options.json` is False.

        """
        options = PredictOptions.merge(options)
        matrix = ensure_matrix(x_matrix)

        result = as_prediction(self.calculate(matrix)).data()
        if inspect.isawaitable(result):
            result = await result
        predictions = list(result)

        if not options.json:
            return predictions

        n_rows = len(matrix)
        n_outputs = self.y_shape[1] if self.y_shape is not None else len(predictions) // max(n_rows, 1)
        logger.debug("Reshaping %d predictions to (%d, %d)", len(predictions), n_rows, n_outputs)
        if not options.probability:
            predictions = [normal_round(p) for p in predictions]
        return reshape(predictions, (n_rows, n_outputs))

    # ================================================
    # Backend model loading
    # ================================================
    def load_model(self, filepath: str | Path, **kwargs: Any) -> Any:
        """
        Loads a saved backend model and stores it on `self.model`.

        Delegates to `tf.keras.models.load_model`, `torch.load` or `joblib.load` \
        depending on the backend.

        Args:
            filepath (str | Path): Location of the saved model.
            kwargs: Passed through to the backend loader.

        Returns:
            Any: The loaded backend model.

        """
        logger.debug("Loading %s model from '%s'", self._backend.value, filepath)
        if self._backend == Backend.TENSORFLOW:
            self.model = self.backend_module.keras.models.load_model(filepath, **kwargs)
        elif self._backend == Backend.TORCH:
            self.model = self.backend_module.load(filepath, **kwargs)
        elif self._backend == Backend.SCIKIT:
            self.model = ensure_joblib().load(filepath, **kwargs)
        else:
            msg = f"Cannot load a model for backend '{self._backend.value}'."
            raise ValueError(msg)
        return self.model

    # ================================================
    # Configurable
    # ================================================
    def get_config(self) -> dict[str, Any]:
        """
        Return configuration required to re-instantiate this model.

        Returns:
            dict[str, Any]: Model configuration.

        """
        return {
            "settings": dict(self.settings),
            "backend": self.backend.value,
        }

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> BaseModel:
        """
        Construct a model from configuration data.

        Description:
            This method instantiates a new model with the given config
            data. It *does not* restore any trained backend model.

        Args:
            config (dict[str, Any]): Model configuration.

        Returns:
            BaseModel: New model instance.

        """
        return cls(settings=config.get("settings"), backend=config["backend"])

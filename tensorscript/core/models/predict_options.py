from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any


@dataclass(frozen=True)
class PredictOptions:
    """
    Output options for `BaseModel.predict`.

    Attributes:
        json (bool): Reshape the flat prediction into a `(n_rows, n_outputs)` \
            nested list. When False, the flat values are returned. Defaults to True.
        probability (bool): Keep raw values. When False (and `json` is True), \
            each value is rounded to the nearest integer. Defaults to True.

    """

    json: bool = True
    probability: bool = True

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, bool):
                msg = f"PredictOptions.{f.name} must be a bool, received: {value!r}"
                raise ValueError(msg)

    @classmethod
    def merge(cls, options: PredictOptions | Mapping[str, Any] | None = None) -> PredictOptions:
        """
        Builds options from defaults overridden by `options`.

        Args:
            options (PredictOptions | Mapping | None): Either a full options object, \
                a mapping of field overrides, or None for the defaults.

        Raises:
            ValueError: If the mapping contains unknown keys or non-bool values.

        """
        if options is None:
            return cls()
        if isinstance(options, PredictOptions):
            return options
        if isinstance(options, Mapping):
            unknown = set(options) - {f.name for f in fields(cls)}
            if unknown:
                msg = f"Unknown predict options: {sorted(unknown)}"
                raise ValueError(msg)
            return replace(cls(), **dict(options))
        msg = f"Unsupported predict options type: {type(options)}"
        raise ValueError(msg)

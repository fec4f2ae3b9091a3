# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
String-keyed binding of user-interface controls to an SpaContext.

Each input field of the record is exposed as an InputControl with a
range, default and step. Values arriving from a form, slider or command
line are sanitised (unparseable → default, then clamped into range)
before they reach the record. Intermediate and output fields are never
writable through the binding.
"""
import logging
import math
from dataclasses import dataclass
from typing import Any

from heliora.domain.context import INPUT_FIELDS, CalculateWhat, SpaContext
from heliora.ports import FieldBinding

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InputControl:
    """A numeric control bound to one input field."""
    key: str
    minimum: float
    maximum: float
    default: float = 0.0
    step: float = 1.0


DEFAULT_CONTROLS: tuple[InputControl, ...] = (
    InputControl("year", -2000, 6000, 0),
    InputControl("month", 1, 12, 1),
    InputControl("day", 1, 31, 1),
    InputControl("hour", 0, 24, 0),
    InputControl("minute", 0, 59, 0),
    InputControl("second", 0, 59.999999, 0, 0.1),
    InputControl("delta_ut1", -0.999999, 0.999999, 0, 0.1),
    InputControl("delta_t", -8000, 8000, 0),
    InputControl("timezone", -18, 18, 0, 0.5),
    InputControl("longitude", -180, 180, 0, 0.1),
    InputControl("latitude", -90, 90, 0, 0.1),
    InputControl("elevation", -6500000, 1000000, 0),
    InputControl("pressure", 0, 5000, 0),
    InputControl("temperature", -272.999999, 6000, 0),
    InputControl("slope", -360, 360, 0),
    InputControl("azm_rotation", -360, 360, 0),
    InputControl("atmos_refract", -5, 5, 0, 0.01),
    InputControl("function", CalculateWhat.ZENITH_AZIMUTH, CalculateWhat.ALL,
                 CalculateWhat.ALL),
)


def sanitise_number(value: Any, minimum: float, maximum: float, default: float) -> float:
    """
    Coerce a raw UI value into a number within [minimum, maximum].

    Values that cannot be parsed as a float (or parse to NaN) become the
    default; the result is then clamped into range.
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        number = default
    if math.isnan(number):
        number = default
    if number < minimum:
        number = minimum
    if number > maximum:
        number = maximum
    return number


class ContextFieldBinding(FieldBinding):
    """Reads and writes the input band of an SpaContext by field name."""

    def __init__(
        self,
        ctx: SpaContext,
        controls: tuple[InputControl, ...] = DEFAULT_CONTROLS,
    ) -> None:
        self.ctx = ctx
        self._controls = {control.key: control for control in controls}
        unknown = set(self._controls) - set(INPUT_FIELDS)
        if unknown:
            raise KeyError(f"Controls for non-input fields: {sorted(unknown)}")

    @property
    def controls(self) -> list[InputControl]:
        return list(self._controls.values())

    def _control(self, key: str) -> InputControl:
        if key not in self._controls:
            raise KeyError(f"'{key}' is not a bindable input field")
        return self._controls[key]

    def get(self, key: str) -> float:
        self._control(key)
        return getattr(self.ctx, key)

    def set(self, key: str, value: Any) -> float:
        control = self._control(key)
        number = sanitise_number(value, control.minimum, control.maximum, control.default)
        if number != sanitise_number(value, -math.inf, math.inf, math.nan):
            logger.warning(
                "Input %s=%r sanitised to %s (range %s..%s)",
                key, value, number, control.minimum, control.maximum,
            )
        if key == "function":
            number = CalculateWhat(int(number))
        setattr(self.ctx, key, number)
        return number

    def reset(self) -> None:
        """Restore every bound field to its control default."""
        for control in self._controls.values():
            self.set(control.key, control.default)

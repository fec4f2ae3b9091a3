# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces at the edge of the SPA domain.

Adapters implement these to bind user-interface fields to the calculation
record and to render its results.
"""
from typing import Any, Protocol, runtime_checkable

from heliora.domain.context import SpaContext
from heliora.domain.julian_day import CalendarInstant
from heliora.domain.season import Season


@runtime_checkable
class FieldBinding(Protocol):
    """Port for reading and writing SPA input fields by name."""

    def get(self, key: str) -> float:
        """Current value of an input field."""
        ...

    def set(self, key: str, value: Any) -> float:
        """Sanitise and store a value; returns the value actually stored."""
        ...


@runtime_checkable
class PositionReport(Protocol):
    """Port for rendering a completed SPA calculation."""

    def render(self, ctx: SpaContext) -> str:
        """Render inputs and outputs of a calculated record."""
        ...


@runtime_checkable
class SeasonReport(Protocol):
    """Port for rendering equinox/solstice instants."""

    def render_seasons(self, events: list[tuple[Season, CalendarInstant]]) -> str:
        """Render a list of (season, UTC instant) pairs."""
        ...

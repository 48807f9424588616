"""Exceptions raised by the layout generator."""

from __future__ import annotations


class MapGenError(RuntimeError):
    """Base class for layout generation failures."""


class MapConfigError(MapGenError, ValueError):
    """Generator configuration cannot produce a layout for the requested size."""


class RoomPlacementError(MapGenError):
    def __init__(self, required: int, placed: int) -> None:
        super().__init__(f"placed {placed} rooms, at least {required} required")
        self.required = required
        self.placed = placed


class InsufficientDoorCandidatesError(MapGenError):
    """Not enough facade positions to give every room a door."""

    def __init__(self, required: int, placed: int, attempts: int) -> None:
        super().__init__(
            f"placed {placed} of {required} doors after {attempts} attempts"
        )
        self.required = required
        self.placed = placed
        self.attempts = attempts


class DetailRewriteError(MapGenError):
    """Wall cleanup kept rewriting after the allowed number of passes."""

    def __init__(self, passes: int) -> None:
        super().__init__(f"wall cleanup did not settle after {passes} passes")
        self.passes = passes

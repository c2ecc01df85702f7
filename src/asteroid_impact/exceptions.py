"""Exceptions raised by the impact estimation pipeline."""

from __future__ import annotations


class InvalidParameterError(ValueError):
    """An input parameter violates its precondition.

    Carries the offending parameter name and value so that callers
    (CLI, HTTP API) can report exactly what was rejected.
    """

    def __init__(self, parameter: str, value: object, reason: str) -> None:
        self.parameter = parameter
        self.value = value
        super().__init__(f"Invalid {parameter}={value!r}: {reason}")

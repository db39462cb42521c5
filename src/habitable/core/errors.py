# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Exceptions raised by the feasibility engine."""


class HabitableError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(HabitableError, ValueError):
    """
    A scenario is missing fields its project type structurally requires.

    Raised for apartment scenarios without units per floor, number of floors
    or a unit mix. Not retried: the same input always fails the same way.
    """

    def __init__(self, message: str, missing_fields=None):
        super().__init__(message)
        self.missing_fields = list(missing_fields or [])


class RecordNotFoundError(HabitableError, KeyError):
    """A repository has no record for the requested identifier."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""

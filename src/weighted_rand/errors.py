"""Error types."""

from __future__ import annotations

from typing_extensions import override

import rich
import rich.markup


class RichException(Exception):
    """Exception with a rich_print method."""

    def rich_print(self):
        rich.print(f"[red]{self!s}[/red]")


class WeightedRandError(RichException):
    """Error raised while building an alias table."""

    def __init__(self, type: str, description: str):
        """
        Initialize.

        :param type: type of error.
        :param description: description of error.
        """

        super().__init__()
        self.type = type
        self.description = description

    def __str__(self):
        return f"{self.type}: {self.description}"

    @override
    def rich_print(self):
        etype = f"[red]{self.type}[/red]"
        expl = rich.markup.escape(self.description)
        rich.print(f"{etype}: {expl}")


class EmptyInputError(WeightedRandError):
    """No weights were given."""

    def __init__(self, description: str = "at least one weight is required"):
        super().__init__("Empty input", description)


class InvalidWeightError(WeightedRandError):
    """A weight is negative, not finite, or not a number."""

    def __init__(self, description: str, index: int | None = None):
        super().__init__("Invalid weight", description)
        self.index = index


class CodegenError(WeightedRandError):
    """Failed to generate code for a table."""

    def __init__(self, description: str):
        super().__init__("Codegen error", description)

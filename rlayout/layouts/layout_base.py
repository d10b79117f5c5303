"""
Layout Base Classes

Provides the Layout interface and the errors layouts report.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional

from ..protocol import GeneratedLayout, Rectangle


class LayoutError(Exception):
    """Base class for errors reported by layouts."""


class UnknownCommand(LayoutError):
    """The command verb is not recognized by the layout."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"unknown command: {command!r}")


class MissingArgument(LayoutError):
    """A required command argument is absent."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"missing argument: {name!r}")


class InvalidArgument(LayoutError):
    """A command argument failed to parse."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"invalid value for argument {name!r}")


class DegenerateArea(LayoutError):
    """The usable area is too small for the configured geometry."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"degenerate layout area: {detail}")


def check_views(views: List[Rectangle]) -> List[Rectangle]:
    """Raise DegenerateArea if any view has a negative size."""
    for index, view in enumerate(views):
        if view.width < 0 or view.height < 0:
            raise DegenerateArea(
                f"view {index} would be {view.width}x{view.height}"
            )
    return views


class Layout(ABC):
    """Abstract base class for layout generators."""

    NAMESPACE: str = ""

    def __init__(self, debug: bool = False):
        self.debug = debug

    @property
    def name(self) -> str:
        """Layout namespace, as announced to the compositor."""
        return self.NAMESPACE

    @abstractmethod
    def generate_layout(
        self,
        view_count: int,
        usable_width: int,
        usable_height: int,
        tags: int = 0,
        output: str = "",
    ) -> GeneratedLayout:
        """
        Calculate view positions and sizes.

        Args:
            view_count: Number of views to place
            usable_width: Width of the usable output area
            usable_height: Height of the usable output area
            tags: Tags of the output being laid out (unused)
            output: Name of the output being laid out (unused)

        Returns:
            Layout name and exactly view_count rectangles

        Raises:
            DegenerateArea: if a view would get a negative size
        """
        pass

    def user_cmd(
        self, command: str, tags: Optional[int] = None, output: str = ""
    ) -> None:
        """
        Apply a free-text user command.

        The first whitespace-separated token is the verb. Errors are
        printed and re-raised; the configuration is left unchanged.
        """
        parts = command.split()
        verb = parts[0] if parts else ""
        try:
            self.handle_command(verb, parts[1:], tags, output)
        except LayoutError as e:
            print(f"{type(self).__name__}: {e}")
            raise

    def handle_command(
        self, verb: str, args: List[str], tags: Optional[int], output: str
    ) -> None:
        """Handle a parsed command. Layouts without commands reject all."""
        raise UnknownCommand(verb)

    def _debug_views(self, views: List[Rectangle]):
        if self.debug:
            for view in views:
                print(f"{type(self).__name__}: {view}")

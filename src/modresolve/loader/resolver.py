"""Resolver interface consumed by module loading hosts."""

from abc import ABC, abstractmethod


class Resolver(ABC):
    """
    Turns an import specifier into a loadable path.

    Implementations return a "/"-separated relative path and raise
    ResolutionError when the module cannot be found.
    """

    @abstractmethod
    def resolve(self, base: str, name: str) -> str:
        """
        Args:
            base: Specifier of the importing module (e.g. "src/main.js")
            name: Requested module name (e.g. "./util" or "lodash")
        """
        ...

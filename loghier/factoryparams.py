"""String parameters handed to factories, with required/optional lookup."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

__all__ = ["ConfigurationError", "FactoryParams", "ParameterValidator"]

T = TypeVar("T")


class ConfigurationError(RuntimeError):
    """Raised when a factory cannot be configured from its parameters."""


class FactoryParams(dict):
    """A mapping of parameter names to string values."""

    def get_for(self, tag: str) -> "ParameterValidator":
        """Return a validator that names ``tag`` in its error messages."""
        return ParameterValidator(tag, self)


class ParameterValidator:
    """Looks up parameters for the component described by ``tag``."""

    def __init__(self, tag: str, params: FactoryParams) -> None:
        self.tag = tag
        self.params = params

    def _convert(self, name: str, raw: str, convert: Callable[[str], Any]) -> Any:
        try:
            return convert(raw)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(
                f"Property '{name}' has invalid value '{raw}' to configure {self.tag}"
            ) from exc

    def required(self, name: str, convert: Callable[[str], T] = str) -> T:
        """Return parameter ``name`` converted by ``convert``.

        Raises ``ConfigurationError`` when the parameter is missing.
        """
        if name not in self.params:
            raise ConfigurationError(f"Property '{name}' required to configure {self.tag}")
        return self._convert(name, self.params[name], convert)

    def optional(
        self, name: str, default: Any = None, convert: Callable[[str], Any] = str
    ) -> Any:
        """Return parameter ``name`` converted by ``convert``, or ``default``."""
        if name not in self.params:
            return default
        return self._convert(name, self.params[name], convert)
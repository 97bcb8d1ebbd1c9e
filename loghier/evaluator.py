"""Evaluators that decide whether an event triggers an action, and their factory."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from .factoryparams import FactoryParams
from .loggingevent import LoggingEvent

__all__ = [
    "TriggeringEventEvaluator",
    "LevelEvaluator",
    "TriggeringEventEvaluatorFactory",
    "create_level_evaluator",
]

_PRIORITY_VALUES = {
    "EMERG": 0,
    "FATAL": 0,
    "ALERT": 100,
    "CRIT": 200,
    "ERROR": 300,
    "WARN": 400,
    "NOTICE": 500,
    "INFO": 600,
    "DEBUG": 700,
    "NOTSET": 800,
}


def _priority_value(text: str) -> int:
    name = text.strip()
    if name in _PRIORITY_VALUES:
        return _PRIORITY_VALUES[name]
    try:
        return int(name)
    except ValueError:
        raise ValueError(f"unknown priority name: '{text}'") from None


class TriggeringEventEvaluator(ABC):
    """Decides whether a logging event is a trigger."""

    @abstractmethod
    def eval(self, event: LoggingEvent) -> bool:
        """Return True when ``event`` triggers."""


class LevelEvaluator(TriggeringEventEvaluator):
    """Triggers on events at ``level`` or more severe."""

    def __init__(self, level: int) -> None:
        self.level = level

    def eval(self, event: LoggingEvent) -> bool:
        return event.priority <= self.level


CreateFunction = Callable[[FactoryParams], TriggeringEventEvaluator]


class TriggeringEventEvaluatorFactory:
    """Makes evaluators by registered type name."""

    _instance: "TriggeringEventEvaluatorFactory | None" = None

    def __init__(self) -> None:
        self._creators: dict[str, CreateFunction] = {}

    @classmethod
    def get_instance(cls) -> "TriggeringEventEvaluatorFactory":
        """Return the shared factory, with the ``level`` evaluator registered."""
        if cls._instance is None:
            factory = cls()
            factory.register_creator("level", create_level_evaluator)
            cls._instance = factory
        return cls._instance

    def register_creator(self, class_name: str, create_function: CreateFunction) -> None:
        """Register ``create_function`` for ``class_name``; names are unique."""
        if class_name in self._creators:
            raise ValueError(
                f"Creator for Triggering event evaluator with type name '{class_name}' "
                "already registered"
            )
        self._creators[class_name] = create_function

    def create(self, class_name: str, params: FactoryParams) -> TriggeringEventEvaluator:
        """Build an evaluator of type ``class_name`` from ``params``."""
        try:
            creator = self._creators[class_name]
        except KeyError:
            raise ValueError(
                f"There is no triggering event evaluator with type name '{class_name}'"
            ) from None
        return creator(params)

    def registered(self, class_name: str) -> bool:
        """True when a creator exists for ``class_name``."""
        return class_name in self._creators


def create_level_evaluator(params: FactoryParams) -> LevelEvaluator:
    """Build a ``LevelEvaluator`` from the ``level`` parameter (name or number)."""
    level = params.get_for("level evaluator").required("level", _priority_value)
    return LevelEvaluator(level)
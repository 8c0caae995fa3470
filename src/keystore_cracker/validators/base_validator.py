from abc import ABC, abstractmethod
from typing import Callable


class PasswordValidator(ABC):
    """Tests one candidate password. Must be safe to call from many threads."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Human readable name of what is being unlocked."""

    @abstractmethod
    def validate(self, password: str) -> bool:
        """True when `password` unlocks the target."""


class FunctionValidator(PasswordValidator):
    """
    Wrap a plain `str -> bool` callable.
    """

    def __init__(self, func: Callable[[str], bool], description: str = "function validator"):
        self._func = func
        self._description = description

    @property
    def description(self) -> str:
        return self._description

    def validate(self, password: str) -> bool:
        return bool(self._func(password))

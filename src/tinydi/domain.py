"""Domain models used throughout the container."""

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from tinydi.tokens import InjectableToken

__all__ = ["Key", "ProviderKind", "Provider", "ContainerConfig"]


Key = Union[type, InjectableToken, str]


class ProviderKind(Enum):
    """How a registered provider is turned into an instance."""

    VALUE = "value"
    FACTORY = "factory"
    CONSTRUCTIBLE = "constructible"

    @classmethod
    def of(cls, target: Any) -> "ProviderKind":
        """Infer the kind of a raw provider.

        Classes are constructed, other callables are invoked as zero-argument
        factories and anything else is used as-is.

        Example:
            >>> ProviderKind.of(Database)       # CONSTRUCTIBLE
            >>> ProviderKind.of(lambda: 1)      # FACTORY
            >>> ProviderKind.of({"id": "x"})    # VALUE
        """
        if inspect.isclass(target):
            return cls.CONSTRUCTIBLE
        if callable(target):
            return cls.FACTORY
        return cls.VALUE


@dataclass(frozen=True)
class Provider:
    """A raw provider as recorded in a container's registry.

    Attributes:
        target: The registered value, factory function or class.
        kind: How ``target`` is materialised on first resolution.
    """

    target: Any
    kind: ProviderKind

    def materialise(self) -> Any:
        """Build the instance for this provider, letting any error propagate."""
        if self.kind is ProviderKind.VALUE:
            return self.target
        if self.kind is ProviderKind.CONSTRUCTIBLE:
            cls = self.target
            return cls()
        return self.target()


@dataclass(frozen=True)
class ContainerConfig:
    """Configuration fixed when a container is built.

    Attributes:
        strict: Whether re-registering a single-mode key raises instead of
            overwriting the previous provider.
    """

    strict: bool = False

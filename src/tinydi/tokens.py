"""Typed string tokens used as container keys for non-class values."""

from typing import Generic, TypeVar

__all__ = ["InjectableToken", "create_injectable_token"]

T = TypeVar("T")


class InjectableToken(str, Generic[T]):
    """A string key carrying the type its resolved value will have.

    The type parameter exists for type checkers only. At runtime a token is
    its string, so two tokens built from the same string are the same key
    even when their declared types differ.
    """

    __slots__ = ()

    def __repr__(self):
        return f"InjectableToken({str.__repr__(self)})"


def create_injectable_token(name: str) -> InjectableToken[T]:
    """Create a token for registering and resolving a value of type ``T``.

    Example:
        >>> config_token: InjectableToken[Config] = create_injectable_token("config")
    """
    return InjectableToken(name)

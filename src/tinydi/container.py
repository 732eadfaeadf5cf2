"""
Container holding providers and the instances materialised from them.

Providers are registered under a key (a class or an :class:`InjectableToken`) in
one of three modes:

- single: one provider per key, re-registration overwrites unless the container
  is strict;
- multi: an ordered list of providers per key, resolved to a list of instances;
- named: one provider per (key, name) pair, never overwritten.

Nothing is built at registration time. The first ``resolve`` of a key
materialises its provider(s) and caches the result until ``clear_instances``.
"""

import logging
from typing import Any, Callable, Optional, TypeVar, Union

from tinydi.domain import ContainerConfig, Key, Provider, ProviderKind
from tinydi.errors import DuplicateBindingError, UnregisteredKeyError
from tinydi.tokens import create_injectable_token

__all__ = ["Container", "make_container"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING = object()


class Container:
    """Registry of providers with lazily populated instance caches.

    Example:
        >>> container = make_container()
        >>>
        >>> @container.injectable()
        ... class Database:
        ...     pass
        >>>
        >>> container.resolve(Database) is container.resolve(Database)
        True
    """

    def __init__(self, config: Optional[ContainerConfig] = None):
        self.config = config or ContainerConfig()
        self._providers: dict[Key, Union[Provider, list[Provider]]] = {}
        self._named_providers: dict[Key, dict[str, Provider]] = {}
        self._instances: dict[Key, Any] = {}
        self._named_instances: dict[Key, dict[str, Any]] = {}

    def register_provider(
        self,
        key: Key,
        provider: Any = _MISSING,
        *,
        multi: bool = False,
        name: Optional[str] = None,
        kind: Optional[ProviderKind] = None,
    ) -> None:
        """Register a provider under a key.

        Args:
            key: The class or token the provider is bound to.
            provider: A value, zero-argument factory or class. Defaults to
                ``key`` itself, registering a class as its own provider.
            multi: Append to the ordered list of providers for ``key``. A single
                provider already bound to ``key`` is kept as the first entry.
            name: Bind to the (key, name) slot. Takes precedence over ``multi``.
                An empty name means an unnamed binding.
            kind: Override the inferred :class:`ProviderKind`, e.g. to register
                a callable as a plain value.

        Raises:
            DuplicateBindingError: If the (key, name) slot is already taken, or
                the container is strict and ``key`` already has a provider.
        """
        if provider is _MISSING:
            provider = key
        recorded = Provider(provider, kind or ProviderKind.of(provider))

        if name:
            slots = self._named_providers.get(key, {})
            if name in slots:
                raise DuplicateBindingError(key, name)
            slots[name] = recorded
            self._named_providers[key] = slots
        elif multi:
            existing = self._providers.get(key)
            if isinstance(existing, list):
                existing.append(recorded)
            elif existing is not None:
                # an earlier single provider becomes the first entry
                self._providers[key] = [existing, recorded]
            else:
                self._providers[key] = [recorded]
        else:
            if self.config.strict and key in self._providers:
                raise DuplicateBindingError(key)
            self._providers[key] = recorded

        logger.debug(
            "Registered %s provider %r for %r (multi=%s, name=%s)",
            recorded.kind.value,
            provider,
            key,
            multi,
            name,
        )

    def resolve(self, key: Key, *, multi: bool = False, name: Optional[str] = None) -> Any:
        """Return the instance for a key, materialising it on first use.

        Args:
            key: The class or token to resolve.
            multi: Marks a call site expecting the list of a multi-bound key.
                The shape of the result always follows how the key was registered.
            name: Resolve the (key, name) slot instead of the unnamed binding.

        Returns:
            The cached instance, or a list of instances for a multi-bound key.

        Raises:
            UnregisteredKeyError: If nothing is registered for the key (and name).
        """
        if name:
            return self._resolve_named(key, name)

        if key in self._instances:
            return self._instances[key]

        try:
            recorded = self._providers[key]
        except KeyError:
            raise UnregisteredKeyError(key) from None

        logger.debug("Materialising %r", key)
        if isinstance(recorded, list):
            value = [provider.materialise() for provider in recorded]
        else:
            value = recorded.materialise()

        self._instances[key] = value
        return value

    def _resolve_named(self, key: Key, name: str) -> Any:
        instances = self._named_instances.get(key, {})
        if name in instances:
            return instances[name]

        recorded = self._named_providers.get(key, {}).get(name)
        if recorded is None:
            raise UnregisteredKeyError(key, name)

        logger.debug("Materialising %r named %r", key, name)
        value = recorded.materialise()
        self._named_instances.setdefault(key, {})[name] = value
        return value

    def clear_instances(self) -> None:
        """Drop every cached instance. Registered providers are kept."""
        logger.debug(
            "Clearing %d cached instance(s)",
            len(self._instances)
            + sum(len(named) for named in self._named_instances.values()),
        )
        self._instances.clear()
        self._named_instances.clear()

    def injectable(self) -> Callable[[type], type]:
        """Class decorator registering the class as its own provider.

        Example:
            >>> @container.injectable()
            ... class Service:
            ...     def __init__(self):
            ...         self.db = container.resolve(Database)
        """

        def decorator(cls: type) -> type:
            self.register_provider(cls)
            return cls

        return decorator

    def provides(
        self, key: Key, *, multi: bool = False, name: Optional[str] = None
    ) -> Callable[[Callable[[], T]], Callable[[], T]]:
        """Decorator registering a zero-argument function as the factory for a key.

        Example:
            >>> @container.provides(config_token)
            ... def make_config() -> Config:
            ...     return Config(id="test")
        """

        def decorator(func: Callable[[], T]) -> Callable[[], T]:
            self.register_provider(
                key, func, multi=multi, name=name, kind=ProviderKind.FACTORY
            )
            return func

        return decorator

    def is_registered(self, key: Key, name: Optional[str] = None) -> bool:
        """Whether a provider is bound to the key, or to the (key, name) slot when named."""
        if not name:
            return key in self._providers
        return name in self._named_providers.get(key, {})

    def __contains__(self, key: Key) -> bool:
        return self.is_registered(key)

    def registered_keys(self) -> list[Key]:
        """Keys with at least one provider, unnamed bindings first, each key once."""
        keys = list(self._providers)
        keys.extend(key for key in self._named_providers if key not in self._providers)
        return keys

    create_injectable_token = staticmethod(create_injectable_token)


def make_container(strict: bool = False) -> Container:
    """Construct an empty container.

    Args:
        strict: Raise :class:`DuplicateBindingError` when a single-mode key is
            registered twice, instead of letting the last registration win.

    Returns:
        The new :class:`Container`.
    """
    return Container(ContainerConfig(strict))

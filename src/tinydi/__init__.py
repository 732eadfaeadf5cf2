"""tinydi, a minimal dependency injection container.

Providers (classes, plain values or zero-argument factories) are registered in a
:class:`~tinydi.container.Container` under a key, which is either a class or a
typed string token. Instances are built lazily on first resolution and cached
until the container's instances are cleared. There is no constructor
parameter injection: a class asks the container for what it needs.

Basic Usage:
    >>> from tinydi.container import make_container
    >>> from tinydi.tokens import InjectableToken, create_injectable_token
    >>>
    >>> container = make_container()
    >>> config: InjectableToken[dict] = create_injectable_token("config")
    >>> container.register_provider(config, {"dsn": "sqlite://"})
    >>>
    >>> @container.injectable()
    ... class Database:
    ...     def __init__(self):
    ...         self.dsn = container.resolve(config)["dsn"]
    >>>
    >>> container.resolve(Database).dsn
    'sqlite://'

The package consists of:
    - container: Provider registration, resolution and instance caching
    - domain: Provider records, provider kinds and container configuration
    - tokens: Typed string keys for non-class values
    - errors: Container exceptions
"""

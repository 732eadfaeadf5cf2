__all__ = ["DependencyError", "UnregisteredKeyError", "DuplicateBindingError"]


class DependencyError(Exception):
    """Base class for errors raised by a container."""

    pass


class UnregisteredKeyError(DependencyError, KeyError):
    """Raised when no provider is registered for the requested key (and name)."""

    def __init__(self, key, name=None):
        self.key = key
        self.name = name
        if name is None:
            message = f"Value '{key}' is not registered"
        else:
            message = f"Value '{key}' has no provider registered with name '{name}'"
        super().__init__(message)

    def __str__(self):
        # KeyError quotes its argument
        return self.args[0]


class DuplicateBindingError(DependencyError):
    """Raised when a named slot, or a single key in strict mode, is registered twice."""

    def __init__(self, key, name=None):
        self.key = key
        self.name = name
        if name is None:
            message = f"'{key}' has already been registered"
        else:
            message = f"'{key}' has already been registered with name '{name}'"
        super().__init__(message)

"""Exception types raised around (never inside) the metric computations."""


class PasswordTypeError(TypeError):
    """Raised when a password is neither ``str`` nor ``None``."""


class UnknownBackendError(KeyError):
    """Raised when a backend name is not registered in ``BACKENDS``."""

    def __init__(self, name: str, choices):
        self.name = name
        self.choices = tuple(choices)
        super().__init__(name)

    def __str__(self) -> str:
        return f"unknown backend '{self.name}' (choose from {', '.join(self.choices)})"


class ConfigError(ValueError):
    """Raised when a ``PWSTRENGTH_*`` environment variable has a bad value."""

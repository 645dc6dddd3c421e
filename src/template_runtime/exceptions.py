"""Exceptions raised for caller contract violations."""


class TemplateRuntimeError(Exception):
    """Base class for runtime support errors."""


class InvalidArgumentError(TemplateRuntimeError, TypeError):
    """A filter or primitive received a value it cannot operate on."""


class UnknownFilterError(TemplateRuntimeError, ValueError):
    """A filter name is not registered."""


class EnvironmentLockedError(TemplateRuntimeError, RuntimeError):
    """The environment was mutated after freezing or during a render."""

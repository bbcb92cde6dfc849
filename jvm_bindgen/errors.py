"""Exceptions raised while generating bindings."""


class BindgenError(Exception):
    """Base class for all binding generator errors."""


class SetupError(BindgenError):
    """The run cannot start or continue: JVM, config or output dir failure."""


class ConfigError(SetupError):
    """The configuration file cannot be read, written or understood."""


class ExtractionError(BindgenError):
    """Introspecting a class through the bridge failed."""

    def __init__(self, class_name: str, cause: Exception) -> None:
        """Wrap the bridge failure for ``class_name``."""
        super().__init__(f"Failed to extract {class_name}: {cause}")
        self.class_name = class_name
        self.cause = cause


class MalformedDescriptorError(BindgenError, ValueError):
    """A type name or descriptor does not start with a recognized marker."""


class OutputCollisionError(BindgenError):
    """Two classes would be written to the same output file."""

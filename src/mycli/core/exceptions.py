"""
Exception classes for mycli.
"""


class MyCliError(Exception):
    """Base exception for mycli errors."""


class LoaderError(MyCliError):
    """Startup composition failed."""


class FactoryError(LoaderError):
    """A unit factory is invalid, raised, or returned an unusable value."""


class CapabilityCollisionError(LoaderError):
    """A capability name was registered twice."""


class MissingCapabilityError(LoaderError):
    """A factory requires a capability that is not registered yet."""


class BagSealedError(LoaderError):
    """Registration attempted after startup finished."""


class MissingOptionError(MyCliError):
    """A required command option was not supplied."""


class StdinTimeoutError(MyCliError):
    """No input arrived on standard input within the configured timeout."""

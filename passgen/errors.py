"""
passgen.errors
Exception types raised by the resolver, the sampler and the random source.
"""


class PassgenError(Exception):
    """Base class for every error raised by passgen."""


class ConfigError(PassgenError, ValueError):
    """The requested configuration cannot be turned into a password policy."""


class InvalidLength(ConfigError):
    """Password length is not a positive integer within the allowed ceiling."""


class RngUnavailable(PassgenError, RuntimeError):
    """The operating system entropy source could not be obtained."""

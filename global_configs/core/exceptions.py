from __future__ import annotations

"""Configuration store exception classes.

Lookup misses are not errors (``get`` returns ``None``) and converter failures
are never wrapped, so only the failures below originate in this package.
"""

from typing import Optional


class ConfigError(Exception):
    """Base exception for all configuration store errors.

    Carries the file or asset the failure relates to, when known, and the
    underlying exception that caused it.
    """

    def __init__(self, message: str, path: Optional[str] = None,
                 cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.path = path
        self.cause = cause

    def __str__(self) -> str:
        if self.path:
            return f"[{self.path}] {super().__str__()}"
        return super().__str__()


class ConfigDecodeError(ConfigError):
    """Raised when asset or override content is not a JSON object.

    Covers malformed JSON as well as valid JSON whose top level is not an
    object. No fallback value is substituted.
    """
    pass


class ConfigIOError(ConfigError):
    """Raised when reading or writing configuration storage fails.

    This includes missing bundled assets, an uncreatable support directory,
    and failed reads or writes of the override file.
    """
    pass


class ConfigPathError(ConfigError, ValueError):
    """Raised when a mutating call receives an empty path."""
    pass

"""
Exceptions raised by lssig.

Lookup failures (no properties file, missing field) derive from
``CredentialsError``, which is also an ``OSError``. A broken HMAC primitive
raises ``SigningError`` instead, which callers are not expected to recover from.
"""

import os
from typing import Optional, Sequence, Union

PathLike = Union[str, "os.PathLike[str]"]


class LssigError(Exception):
    """Base class for all lssig errors."""


class CredentialsError(LssigError, OSError):
    """Credentials could not be read from a properties file."""


class PropsFileNotFoundError(CredentialsError):
    def __init__(self, paths: Sequence[PathLike]) -> None:
        self.paths = [os.fspath(p) for p in paths]
        if self.paths:
            tried = ', '.join(self.paths)
            message = f"Could not find props file in any of: {tried}"
        else:
            message = "Could not find props file: no candidate paths given"
        super().__init__(message)


class MissingFieldError(CredentialsError):
    def __init__(self, field: str, path: Optional[PathLike] = None) -> None:
        self.field = field
        self.path = os.fspath(path) if path is not None else None
        message = f"Could not find {field!r}"
        if self.path:
            message += f" in {self.path}"
        super().__init__(message)


class SigningError(LssigError, RuntimeError):
    """The HMAC-SHA1 primitive could not be set up. This should never happen."""

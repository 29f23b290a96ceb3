"""
LittleShoot AWS credentials and HMAC-SHA1 request signing

This package reads the AWS access key pair from the local LittleShoot
properties file and signs canonical strings with HMAC-SHA1, without depending
on botocore.
"""

from .credentials import (
    Credentials,
    get_access_key,
    get_access_key_id,
    has_props_file,
    load_credentials,
)
from .exceptions import (
    CredentialsError,
    LssigError,
    MissingFieldError,
    PropsFileNotFoundError,
    SigningError,
)
from .signer import form_urlencode, sign

__version__ = "0.1.0"
__all__ = [
    "Credentials",
    "CredentialsError",
    "LssigError",
    "MissingFieldError",
    "PropsFileNotFoundError",
    "SigningError",
    "form_urlencode",
    "get_access_key",
    "get_access_key_id",
    "has_props_file",
    "load_credentials",
    "sign",
]

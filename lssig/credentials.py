"""
Locate the LittleShoot properties file and read AWS credentials from it.

Candidates are checked in order and the first regular file wins:

    ~/.littleshoot/littleshoot.properties
    /etc/littleshoot/littleshoot.properties

Every call re-reads the file; nothing is cached.
"""

import configparser
import logging
import os
import re
from pathlib import Path
from typing import Dict, Iterable, List, NamedTuple, Optional

from .exceptions import MissingFieldError, PathLike, PropsFileNotFoundError

logger = logging.getLogger("lssig.credentials")

PROPS_DIR_NAME = '.littleshoot'
PROPS_FILE_NAME = 'littleshoot.properties'
SYSTEM_PROPS_PATH = Path('/etc/littleshoot') / PROPS_FILE_NAME

ACCESS_KEY_ID = 'accessKeyId'
ACCESS_KEY = 'accessKey'

# properties files have no sections, so the parser gets a synthetic one
_SECTION = 'properties'
# only the synthetic header counts as a section; other bracketed lines are keys
_SECTION_HEADER = re.compile(r'\[(?P<header>' + _SECTION + r')\]$')


class Credentials(NamedTuple):
    access_key_id: str
    access_key: str

    def __repr__(self) -> str:
        return f"Credentials(access_key_id={self.access_key_id!r}, access_key='***')"


def default_props_paths() -> List[Path]:
    return [Path.home() / PROPS_DIR_NAME / PROPS_FILE_NAME, SYSTEM_PROPS_PATH]


def locate_props_file(paths: Optional[Iterable[PathLike]] = None) -> Path:
    """
    Return the first candidate path that is a regular file.

    :param paths: Ordered candidate paths. Defaults to ``default_props_paths()``.
    :raises PropsFileNotFoundError: If none of the candidates is a file.
    """
    candidates = [Path(p) for p in (default_props_paths() if paths is None else paths)]
    for candidate in candidates:
        if candidate.is_file():
            logger.debug("Using props file %s", candidate)
            return candidate
    raise PropsFileNotFoundError(candidates)


def _decode(raw: bytes) -> str:
    try:
        return raw.decode('utf-8')
    except UnicodeDecodeError:
        # ISO-8859-1 is the classic properties encoding and maps every byte
        return raw.decode('latin-1')


def load_properties(path: PathLike) -> Dict[str, str]:
    """
    Parse a ``key=value`` properties file into a dict.

    ``key:value`` is accepted too, ``#`` and ``!`` start comment lines, and a
    repeated key keeps its last value. Keys are case-sensitive and values are
    taken literally, except that surrounding whitespace is stripped from both
    (``java.util.Properties`` keeps trailing whitespace on values). Bracketed
    lines such as ``[DEFAULT]`` are not section headers; they read as keys
    with an empty value. The file is decoded as UTF-8, falling back to
    Latin-1 when it is not valid UTF-8.
    """
    parser = configparser.ConfigParser(
        delimiters=('=', ':'),
        comment_prefixes=('#', '!'),
        inline_comment_prefixes=None,
        allow_no_value=True,
        strict=False,
        empty_lines_in_values=False,
        interpolation=None,
    )
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    parser.SECTCRE = _SECTION_HEADER  # type: ignore[misc]

    with open(path, 'rb') as fp:
        raw = fp.read()
    # leading whitespace would otherwise read as a value continuation
    lines = [line.lstrip() for line in _decode(raw).splitlines()]
    parser.read_string(f"[{_SECTION}]\n" + '\n'.join(lines), source=os.fspath(path))

    return {key: value or '' for key, value in parser.items(_SECTION)}


def read_props(paths: Optional[Iterable[PathLike]] = None) -> Dict[str, str]:
    return load_properties(locate_props_file(paths))


def _require(props: Dict[str, str], field: str, path: Path) -> str:
    value = props.get(field)
    if value is None or not value.strip():
        raise MissingFieldError(field, path)
    return value


def get_access_key_id(paths: Optional[Iterable[PathLike]] = None) -> str:
    path = locate_props_file(paths)
    return _require(load_properties(path), ACCESS_KEY_ID, path)


def get_access_key(paths: Optional[Iterable[PathLike]] = None) -> str:
    path = locate_props_file(paths)
    return _require(load_properties(path), ACCESS_KEY, path)


def load_credentials(paths: Optional[Iterable[PathLike]] = None) -> Credentials:
    """Read both credential fields from a single pass over the props file."""
    path = locate_props_file(paths)
    props = load_properties(path)
    return Credentials(
        access_key_id=_require(props, ACCESS_KEY_ID, path),
        access_key=_require(props, ACCESS_KEY, path),
    )


def has_props_file(paths: Optional[Iterable[PathLike]] = None) -> bool:
    """Whether a readable props file exists; the keys in it are not checked."""
    try:
        read_props(paths)
    except OSError as exc:
        logger.debug("No props file found: %s", exc)
        return False
    return True

"""Loading and validation of the JSON server configuration."""

import json
from dataclasses import dataclass

from .errlog import ServerError, warning

JSON_FORMAT = (
    "{\n"
    '\t"port": <number>,\n'
    '\t"ip": <string>,\n'
    '\t"recv_header_sz": <number>,\n'
    '\t"recv_body_sz": <number>,\n'
    '\t"resp_header_sz": <number>,\n'
    '\t"resp_body_sz": <number>,\n'
    '\t"timeout_s": <number>,\n'
    '\t"max_clients": <number>\n'
    "}"
)

MAX_CLIENTS = 100
_ADDR_LENGTH = 15
_SIZE_FIELDS = (
    "recv_header_sz",
    "recv_body_sz",
    "resp_header_sz",
    "resp_body_sz",
    "timeout_s",
)
_REQUIRED = frozenset({"port", "ip", "max_clients", *_SIZE_FIELDS})
_WHITESPACE = "".join(chr(c) for c in range(33))


class ConfigError(ServerError):
    """The configuration file is missing, unreadable or invalid."""


@dataclass
class ServerConfig:
    """Validated server configuration."""

    port: int
    addr: str
    recv_header_sz: int
    recv_body_sz: int
    resp_header_sz: int
    resp_body_sz: int
    timeout_s: int
    max_clients: int


class _Pairs(list):
    """Key/value pairs of a JSON object, duplicates kept in order."""


def _reject_constant(name):
    raise ValueError(f"unsupported constant {name}")


_DECODER = json.JSONDecoder(object_pairs_hook=_Pairs, parse_constant=_reject_constant)


def _incomplete():
    return ConfigError(f"json incomplete. Expected format: {JSON_FORMAT}")


def _invalid():
    return ConfigError(f"invalid attribute in json. Expected format: {JSON_FORMAT}")


def _integral(value):
    if isinstance(value, float) and not value.is_integer():
        raise ConfigError("config does not accept floating point numbers")
    return int(value)


def _mark(seen, key, message):
    if key in seen:
        warning(message)
    else:
        seen.add(key)


def parse_config(text):
    """Parse configuration JSON text into a ServerConfig."""
    try:
        document, _ = _DECODER.raw_decode(text.lstrip(_WHITESPACE))
    except ValueError:
        raise ConfigError("json parsing failed") from None

    if not isinstance(document, _Pairs) or not document:
        raise _incomplete()

    seen = set()
    values = {}
    for key, value in document:
        if isinstance(value, str):
            if key != "ip":
                raise _invalid()
            _mark(seen, "ip", "ip address set twice")
            values["addr"] = value[:_ADDR_LENGTH]
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            number = _integral(value)
            if key == "port":
                _mark(seen, key, "port set twice")
                if not 1 <= number <= 0xFFFF:
                    raise ConfigError(f"invalid port number: {number}")
            elif key == "max_clients":
                if number <= 0:
                    raise ConfigError("max_clients can't be zero or less")
                _mark(seen, key, "max_clients set twice")
                if number > MAX_CLIENTS:
                    raise ConfigError(
                        f"maximum value for max_clients({MAX_CLIENTS}) exceeded"
                    )
            elif key in _SIZE_FIELDS:
                _mark(seen, key, f"{key} set twice")
            else:
                raise _invalid()
            values[key] = number
        else:
            raise _invalid()

    if seen != _REQUIRED:
        raise _incomplete()
    return ServerConfig(**values)


def load_config(file_name):
    """Read and parse the configuration file at ``file_name``."""
    try:
        with open(file_name, "rb") as handle:
            raw = handle.read()
    except OSError:
        raise ConfigError(f"file {file_name} cannot be opened") from None
    if not raw:
        raise ConfigError(f"file {file_name} is empty")
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        raise ConfigError("json parsing failed") from None
    return parse_config(text)
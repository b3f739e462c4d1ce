"""Parsed HTTP request header data."""

from dataclasses import dataclass, field


@dataclass
class HeaderData:
    """Request line and header fields of an HTTP request."""

    method: str | None = None
    path: str | None = None
    version: str | None = None
    headers: list = field(default_factory=list)

    def lookup(self, key):
        """Return the value of the first header named ``key``, or None."""
        wanted = key.lower()
        return next(
            (value for name, value in self.headers if name.lower() == wanted),
            None,
        )


def _show(value):
    return "NULL" if value is None else value


def describe(data):
    """Return a readable dump of ``data`` (which may be None)."""
    if data is None:
        return "NULL\n"
    lines = [
        "header_data: {",
        f'\tmethod: "{_show(data.method)}"',
        f'\tpath: "{_show(data.path)}"',
        f'\tversion: "{_show(data.version)}"',
        "\theaders: {",
    ]
    lines.extend(f'\t\t"{_show(k)}": "{_show(v)}"' for k, v in data.headers)
    lines.extend(["\t}", "}"])
    return "\n".join(lines) + "\n"
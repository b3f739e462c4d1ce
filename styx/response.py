"""Building and sending HTTP responses for static files."""

import os

from .errlog import ServerError, warning
from .state import Status

STATIC_DIR = "static"
_OCTET_STREAM = "application/octet-stream"

MIME_TYPES = {
    "html": "text/html",
    "htm": "text/html",
    "css": "text/css",
    "js": "text/javascript",
    "mjs": "text/javascript",
    "avif": "image/avif",
    "ico": "image/vnd.microsoft.icon",
    "jpeg": "image/jpeg",
    "jpg": "image/jpeg",
    "mp3": "audio/mpeg",
    "mp4": "video/mp4",
    "mpeg": "video/mpeg",
    "otf": "font/otf",
    "ttf": "font/ttf",
    "png": "image/png",
    "pdf": "application/pdf",
    "svg": "image/svg+xml",
    "txt": "text/plain",
    "wav": "audio/wav",
    "weba": "audio/webm",
    "webm": "video/webm",
    "webp": "image/webp",
    "xml": "application/xml",
    "json": "application/json",
    "jsonld": "application/ld+json",
    "gif": "image/gif",
}

REASONS = {
    Status.BAD_REQUEST: "Bad Request",
    Status.NOT_FOUND: "Not Found",
    Status.CONTENT_TOO_LARGE: "Payload Too Large",
    Status.REQU_HEAD_FIELDS_TOO_LARGE: "Request Header Fields Too Large",
    Status.INTERNAL_SERVER_ERROR: "Internal Server Error",
    Status.NOT_IMPLEMENTED: "Not Implemented",
    Status.INSUFFICIENT_STORAGE: "Insufficient Storage",
}

_ERROR_HTML = (
    "<!DOCTYPE html>\n"
    '<html lang="en">\n'
    "<head>\n"
    '\t<meta charset="UTF-8">\n'
    '\t<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
    "\t<title>{code} {reason}</title>\n"
    "</head>\n"
    "<body>\n"
    "\t<h1>An error has occured: {code} {reason}</h1>\n"
    "</body>\n"
    "</html>\n"
)


def get_mime_type(path):
    """Return the MIME type for the file extension of ``path``."""
    if path == "/":
        return "text/html"
    _, slash, file_name = path.rpartition("/")
    if not slash or not file_name:
        return _OCTET_STREAM
    _, dot, ending = file_name.rpartition(".")
    if not dot or not ending:
        return _OCTET_STREAM
    return MIME_TYPES.get(ending.lower(), _OCTET_STREAM)


def read_static_file(body, path, static_dir=STATIC_DIR):
    """Load the static file for ``path`` into ``body`` and return a Status."""
    if path == "/":
        status = read_static_file(body, "/index.html", static_dir)
        if status == Status.NOT_FOUND:
            return read_static_file(body, "/index.htm", static_dir)
        return status

    full_path = os.fspath(static_dir) + path
    try:
        handle = open(full_path, "rb")
    except OSError:
        warning(f"cannot open / find {full_path}")
        return Status.NOT_FOUND
    with handle:
        try:
            file_size = handle.seek(0, os.SEEK_END)
        except OSError:
            warning(f"cannot find end of {full_path}")
            return Status.INTERNAL_SERVER_ERROR
        if file_size <= 0:
            warning(f"cannot read {full_path}")
            return Status.INTERNAL_SERVER_ERROR
        if file_size >= body.size:
            warning(f"{full_path} too big to be sent")
            return Status.INSUFFICIENT_STORAGE
        handle.seek(0)
        try:
            data = handle.read(file_size)
        except OSError:
            data = b""
    if len(data) != file_size:
        warning(f"{full_path} cannot be read correctly")
        return Status.INTERNAL_SERVER_ERROR
    if body.payload is None:
        raise ServerError("buffer is not allocated")
    body.payload[:file_size] = data
    body.bytes_written += file_size
    return Status.OK


def error_page(code):
    """Return the HTML error page for status ``code``."""
    reason = REASONS.get(code, REASONS[Status.INTERNAL_SERVER_ERROR])
    return _ERROR_HTML.format(code=int(code), reason=reason)


def _status_line(code, reason):
    return f"HTTP/1.1 {code} {reason}\r\n"


def build_response(bufs, request_data, state, static_dir=STATIC_DIR):
    """Fill the response buffers; return False if something did not fit."""
    head, body = bufs.resp.head, bufs.resp.body
    fields = ""

    if state.code == Status.NOT_PROCESSED:
        if request_data is None:
            raise ServerError("request_data cannot be NULL")
        state.code = read_static_file(body, request_data.path, static_dir)
        if state.code == Status.OK:
            fields = (
                f"Content-Type: {get_mime_type(request_data.path)}\r\n"
                f"Content-Length: {body.bytes_written}\r\n"
            )
            if state.current_request == state.max_requests and state.keep_alive:
                fields += (
                    "Connection: Keep-Alive\r\n"
                    f"Keep-Alive: timeout={int(state.timeout)}, "
                    f"max={state.max_requests}\r\n"
                )

    if state.code == Status.OK:
        result = head.append(_status_line(200, "Ok")) and head.append(fields)
        if request_data is not None and request_data.method == "HEAD":
            body.bytes_written = 0
    else:
        if state.code in REASONS:
            code = int(state.code)
            reason = REASONS[state.code]
        else:
            code = int(Status.INTERNAL_SERVER_ERROR)
            reason = REASONS[Status.INTERNAL_SERVER_ERROR]
        result = head.append(_status_line(code, reason))
        page = error_page(state.code)
        result = result and body.append(page)
        result = result and head.append(
            f"Content-Type: text/html\r\nContent-Length: {len(page)}\r\n"
        )

    return result and head.append("\r\n")


def send_response(sock, message):
    """Send the head and then the body of ``message``; return success."""
    for buffer in (message.head, message.body):
        payload = buffer.payload if buffer.payload is not None else b""
        try:
            sock.sendall(bytes(payload[: buffer.bytes_written]))
        except OSError:
            return False
    return True


def response(sock, bufs, request_data, state, static_dir=STATIC_DIR):
    """Build the response for the request and send it over ``sock``."""
    if build_response(bufs, request_data, state, static_dir) and not send_response(
        sock, bufs.resp
    ):
        warning("response not sent properly")
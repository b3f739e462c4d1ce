"""Fixed-size buffers holding raw HTTP requests and responses."""

from dataclasses import dataclass

from .errlog import ServerError, warning


@dataclass
class Buffer:
    """A fixed-capacity byte buffer; ``payload`` is None until allocated."""

    size: int
    payload: bytearray | None = None
    bytes_written: int = 0

    def allocate(self):
        """Allocate a zeroed payload of ``size`` bytes."""
        if self.size <= 0:
            raise ServerError("buffer allocation failed")
        self.payload = bytearray(self.size)
        self.bytes_written = 0

    def release(self):
        """Drop the payload and reset the written count."""
        self.payload = None
        self.bytes_written = 0

    def clear(self):
        """Zero the payload so it can be reused."""
        if self.payload is None:
            raise ServerError("buffer is not allocated")
        self.payload[:] = bytes(len(self.payload))
        self.bytes_written = 0

    def append(self, data):
        """Append ``data``; warn and return False if it does not fit."""
        if isinstance(data, str):
            data = data.encode()
        if self.payload is None:
            raise ServerError("buffer is not allocated")
        if self.size - self.bytes_written <= len(data):
            warning("message too big for buffer")
            return False
        end = self.bytes_written + len(data)
        self.payload[self.bytes_written:end] = data
        self.bytes_written = end
        return True


@dataclass
class Message:
    """An HTTP message split into head and body buffers."""

    head: Buffer
    body: Buffer


@dataclass
class MessageBuffers:
    """Buffers for the received request and the outgoing response."""

    recv: Message
    resp: Message

    def _buffers(self):
        yield self.resp.head
        yield self.resp.body
        yield self.recv.head
        yield self.recv.body

    def allocate(self):
        """Allocate all payloads; on failure release them all and raise."""
        try:
            for buffer in self._buffers():
                buffer.allocate()
        except ServerError:
            self.release()
            raise

    def release(self):
        """Release all payloads."""
        for buffer in self._buffers():
            buffer.release()

    def clear(self):
        """Zero all payloads for the next request on the connection."""
        for buffer in self._buffers():
            buffer.clear()


def setup_buffers(config):
    """Create unallocated buffers sized from ``config``."""
    return MessageBuffers(
        recv=Message(
            head=Buffer(config.recv_header_sz + 1),
            body=Buffer(config.recv_body_sz + 1),
        ),
        resp=Message(
            head=Buffer(config.resp_header_sz + 1),
            body=Buffer(config.resp_body_sz + 1),
        ),
    )
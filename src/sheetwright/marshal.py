"""Scoped ownership of text handed across to the engine."""

from __future__ import annotations

import logging
from types import TracebackType

logger = logging.getLogger(__name__)


class BufferScope:
    """Owns the transcoded text buffers created for one engine call.

    Text is transcoded to UTF-8 on acquisition, so unencodable input fails
    here instead of inside the engine. Every buffer is released when the
    scope exits, whether the call succeeded or raised.
    """

    def __init__(self) -> None:
        self._buffers: list[bytearray] = []
        self.acquired = 0
        self.released = 0

    def __enter__(self) -> BufferScope:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()

    @property
    def live(self) -> int:
        """Number of buffers acquired and not yet released."""
        return len(self._buffers)

    def acquire_text(self, text: str, *, field: str = "text") -> str:
        """Transcode ``text`` into an owned buffer and return the engine copy.

        Raises:
            ValueError: If the text is not encodable or contains NUL.
        """
        try:
            encoded = text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValueError(f"{field} is not valid UTF-8 text: {text!r}") from exc
        if b"\x00" in encoded:
            raise ValueError(f"{field} must not contain NUL characters.")
        buffer = bytearray(encoded)
        self._buffers.append(buffer)
        self.acquired += 1
        return buffer.decode("utf-8")

    def release(self) -> None:
        """Release every buffer still owned by the scope."""
        while self._buffers:
            buffer = self._buffers.pop()
            buffer.clear()
            self.released += 1
        logger.debug("released %d buffer(s)", self.released)


__all__ = ["BufferScope"]

from __future__ import annotations


class TransportError(RuntimeError):
    """The HTTP exchange could not be completed or its body could not be decoded.

    The underlying exception (network error, invalid URL, JSON error) is kept
    as ``__cause__``.
    """

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url

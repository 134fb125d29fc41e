"""Named-pipe plumbing shared by the chat programs: errors, wire format, receiving."""

from __future__ import annotations

import enum
import os
import threading
from pathlib import Path
from typing import BinaryIO, Iterator, TextIO

MAX_CHUNK = 4095
EXIT_COMMAND = "/exit"
_UNKNOWN_SENDER = ""


class ErrorKind(enum.Enum):
    """The ways a chat session can fail."""

    FIFO_CREATE = 1
    FORK = 2
    OPEN = 3
    WRITE = 4


_DESCRIPTIONS = {
    ErrorKind.FIFO_CREATE: "Errore: non è stata creata correttamente la named pipe.",
    ErrorKind.FORK: "Errore: impossibile creare il processo figlio.",
    ErrorKind.OPEN: "Errore: impossibile aprire la named pipe in scrittura o in lettura.",
    ErrorKind.WRITE: "Errore: non è stato possibile scrivere sulla pipe.",
}


def describe(kind: ErrorKind) -> str:
    """Return the user-facing description of an error kind."""
    return _DESCRIPTIONS[ErrorKind(kind)]


class ChatError(Exception):
    """A failure while setting up or using a chat pipe."""

    def __init__(self, kind: ErrorKind, detail: str = "") -> None:
        self.kind = ErrorKind(kind)
        self.detail = detail
        message = describe(self.kind)
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


def ensure_fifo(path: str | os.PathLike[str]) -> Path:
    """Create the pipe's directory if needed, then the named pipe itself.

    Fails if the pipe cannot be created, including when it already exists.
    """
    fifo = Path(path)
    try:
        fifo.parent.mkdir(mode=0o777, parents=True, exist_ok=True)
    except OSError:
        pass
    try:
        os.mkfifo(fifo, 0o666)
    except OSError as exc:
        raise ChatError(ErrorKind.FIFO_CREATE, str(exc)) from exc
    return fifo


def encode_message(text: str) -> bytes:
    """Encode a message as it travels through the pipe: UTF-8, NUL-terminated."""
    return text.encode("utf-8") + b"\0"


def decode_chunk(chunk: bytes) -> str:
    """Decode the text of a chunk up to its first NUL byte."""
    return chunk.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def iter_incoming(stream: BinaryIO, chunk_size: int = MAX_CHUNK) -> Iterator[str]:
    """Yield the messages read from a stream until EOF or the exit command."""
    pending = b""
    while chunk := stream.read(chunk_size):
        pending += chunk
        *complete, pending = pending.split(b"\0")
        for raw in complete:
            text = decode_chunk(raw)
            if text == EXIT_COMMAND:
                return
            yield text
    if pending:
        text = decode_chunk(pending)
        if text != EXIT_COMMAND:
            yield text


def format_received(sender: str, text: str) -> str:
    """Format a received message for display."""
    return f"Messaggio ricevuto da {sender}: {text}"


def read_input_lines(stream: TextIO) -> Iterator[str]:
    """Yield typed messages, skipping blank lines and leading whitespace."""
    for line in stream:
        text = line.rstrip("\r\n").lstrip()
        if text:
            yield text


def run_receiver(path: str | os.PathLike[str], out: TextIO) -> int:
    """Print every message arriving on the pipe; return how many were shown."""
    try:
        stream = open(path, "rb", buffering=0)
    except OSError as exc:
        raise ChatError(ErrorKind.OPEN, str(exc)) from exc
    count = 0
    with stream:
        for text in iter_incoming(stream):
            print(format_received(_UNKNOWN_SENDER, text), file=out, flush=True)
            count += 1
    return count


class _Receiver(threading.Thread):
    """Runs a receiver in the background and keeps any error for the caller."""

    def __init__(self, path: str | os.PathLike[str], out: TextIO) -> None:
        super().__init__(daemon=True)
        self._path = path
        self._out = out
        self.error: ChatError | None = None

    def run(self) -> None:
        try:
            run_receiver(self._path, self._out)
        except ChatError as exc:
            self.error = exc

    def finish(self) -> None:
        self.join()
        if self.error is not None:
            raise self.error


def _open_writer(path: str | os.PathLike[str]) -> BinaryIO:
    try:
        return open(path, "wb", buffering=0)
    except OSError as exc:
        raise ChatError(ErrorKind.OPEN, str(exc)) from exc
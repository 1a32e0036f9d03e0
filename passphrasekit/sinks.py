#!/usr/bin/env python3
"""
Output Sinks
============
Write-only destinations for generated phrase characters.

The resolution engine only ever appends characters; it never reads back.
That lets a masked, scrubbable buffer satisfy the same contract as a plain
string builder.

Sinks:
- TextSink: plain ``str`` result (fastest, least protected)
- Utf8Sink: UTF-8 ``bytearray`` the caller can zero after use
- SecureSink: XOR-masked buffer handed over as a ``SecurePhrase``

Usage:
    sink = SecureSink()
    generator.generate_into(sink, PhraseStrength.STRONG)
    with sink.finalize() as phrase:
        with phrase.reveal() as plaintext:
            clipboard.copy(plaintext.decode('utf-8'))
"""

import secrets
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Iterable, Iterator


class OutputSink(ABC):
    """Append-only character destination."""

    def __init__(self):
        self._finalized = False

    def append_char(self, c: str):
        if self._finalized:
            raise RuntimeError(f"{type(self).__name__} has already been finalized")
        if len(c) != 1:
            raise ValueError(f"Expected a single character, got {len(c)}")
        self._append(c)

    def append(self, chars: Iterable[str]):
        for c in chars:
            self.append_char(c)

    def finalize(self) -> Any:
        """Hand the result to the caller. No appends are accepted afterwards."""
        if self._finalized:
            raise RuntimeError(f"{type(self).__name__} has already been finalized")
        self._finalized = True
        return self._result()

    @abstractmethod
    def _append(self, c: str):
        ...

    @abstractmethod
    def _result(self) -> Any:
        ...

    @abstractmethod
    def wipe(self):
        """Discard everything buffered so far."""


class TextSink(OutputSink):
    """Builds a plain string. Strings are immutable and cannot be scrubbed."""

    def __init__(self):
        super().__init__()
        self._chars = []

    def _append(self, c: str):
        self._chars.append(c)

    def _result(self) -> str:
        return ''.join(self._chars)

    def wipe(self):
        self._chars.clear()


class Utf8Sink(OutputSink):
    """Builds a UTF-8 ``bytearray`` that can be zeroed deterministically."""

    def __init__(self):
        super().__init__()
        self._buffer = bytearray()

    def _append(self, c: str):
        self._buffer.extend(c.encode('utf-8'))

    def _result(self) -> bytearray:
        result = self._buffer
        self._buffer = bytearray()
        return result

    def wipe(self):
        _zero(self._buffer)
        self._buffer = bytearray()


def _zero(buffer: bytearray):
    for i in range(len(buffer)):
        buffer[i] = 0


class SecurePhrase:
    """
    A phrase kept XOR-masked in memory.

    Plaintext only exists inside ``reveal()``, in a buffer that is zeroed
    when the block exits. ``wipe()`` (or leaving a ``with`` block) scrubs the
    masked data too.
    """

    def __init__(self, masked: bytearray, pad: bytearray):
        self._masked = masked
        self._pad = pad

    def __len__(self) -> int:
        return len(self._masked)

    def __repr__(self) -> str:
        return f"<SecurePhrase length={len(self)}>"

    def __enter__(self) -> 'SecurePhrase':
        return self

    def __exit__(self, *exc):
        self.wipe()
        return False

    @property
    def is_wiped(self) -> bool:
        return len(self._masked) == 0

    @contextmanager
    def reveal(self) -> Iterator[bytearray]:
        """Yield the UTF-8 plaintext; it is zeroed when the block exits."""
        plaintext = bytearray(m ^ p for m, p in zip(self._masked, self._pad))
        try:
            yield plaintext
        finally:
            _zero(plaintext)

    def wipe(self):
        _zero(self._masked)
        _zero(self._pad)
        self._masked = bytearray()
        self._pad = bytearray()


class SecureSink(OutputSink):
    """Masks each byte with a fresh random pad byte as it is appended."""

    def __init__(self):
        super().__init__()
        self._masked = bytearray()
        self._pad = bytearray()

    def _append(self, c: str):
        for b in c.encode('utf-8'):
            key = secrets.randbits(8)
            self._pad.append(key)
            self._masked.append(b ^ key)

    def _result(self) -> SecurePhrase:
        phrase = SecurePhrase(self._masked, self._pad)
        self._masked = bytearray()
        self._pad = bytearray()
        return phrase

    def wipe(self):
        _zero(self._masked)
        _zero(self._pad)
        self._masked = bytearray()
        self._pad = bytearray()


__all__ = [
    'OutputSink',
    'TextSink',
    'Utf8Sink',
    'SecureSink',
    'SecurePhrase',
]

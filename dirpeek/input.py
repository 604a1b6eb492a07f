"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into key tokens. Printable
keys come back as themselves; escape sequences (arrows, SGR mouse reports)
are consumed whole so their bytes never leak in as letter keys.
"""

from __future__ import annotations

import codecs
import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
MAX_SEQUENCE_BYTES = 64


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_char(fd: int, first: bytes) -> str:
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    text = decoder.decode(first)
    while not text:
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            return decoder.decode(b"", final=True)
        text = decoder.decode(nxt)
    return text


def _read_csi(fd: int) -> str:
    """Consume the rest of an ``ESC [`` sequence and name it."""
    payload: list[bytes] = []
    while len(payload) < MAX_SEQUENCE_BYTES:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return "ESC"
        payload.append(part)
        # Final bytes of a CSI sequence are in 0x40-0x7e.
        if 0x40 <= part[0] <= 0x7E:
            break
    body = b"".join(payload)
    if body.startswith(b"<"):
        return "MOUSE"
    return {
        b"A": "UP",
        b"B": "DOWN",
        b"C": "RIGHT",
        b"D": "LEFT",
    }.get(body, "ESC")


def read_key(fd: int) -> str:
    """Block for one key and return its token; ``""`` means end of input."""
    ch = os.read(fd, 1)
    if not ch:
        return ""

    if ch == b"\r":
        return "ENTER"
    if ch in {b"\x08", b"\x7f"}:
        return "BACKSPACE"
    if ch == b"\x03":
        return "CTRL_C"
    if ch != b"\x1b":
        return _read_utf8_char(fd, ch)

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"[":
        return _read_csi(fd)
    if seq == b"O":
        _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        return "ESC"
    return "ESC"


__all__ = ["ESC_SEQUENCE_TIMEOUT_MS", "read_key"]

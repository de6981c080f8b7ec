"""FNV-1a hashing over byte buffers and NUL-terminated strings."""

from __future__ import annotations

from typing import Union

FNV1A_32_OFFSET_BASIS = 0x811C9DC5
FNV1A_32_PRIME = 0x01000193
FNV1A_64_OFFSET_BASIS = 0xCBF29CE484222325
FNV1A_64_PRIME = 0x100000001B3

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

BytesLike = Union[bytes, bytearray, memoryview]


def _as_view(data: BytesLike, length: int | None) -> memoryview:
    if data is None or isinstance(data, str):
        raise TypeError(f"Expected a bytes-like object, got {type(data).__name__}")
    try:
        view = memoryview(data).cast("B")
    except TypeError as exc:
        raise TypeError(f"Expected a bytes-like object, got {type(data).__name__}") from exc

    if length is None:
        return view
    if length < 0 or length > len(view):
        raise ValueError(f"length {length} outside buffer of {len(view)} bytes")
    return view[:length]


def _as_cstring(text: str | BytesLike) -> bytes:
    if isinstance(text, str):
        raw = text.encode("utf-8")
    else:
        raw = bytes(_as_view(text, None))
    end = raw.find(b"\0")
    return raw if end < 0 else raw[:end]


def _fnv1a(data: memoryview | bytes, basis: int, prime: int, mask: int) -> int:
    hval = basis
    for byte in data:
        hval ^= byte
        hval = (hval * prime) & mask
    return hval


def hash32(data: BytesLike, length: int | None = None) -> int:
    """Return the 32-bit FNV-1a digest of the first `length` bytes of `data`."""
    return _fnv1a(_as_view(data, length), FNV1A_32_OFFSET_BASIS, FNV1A_32_PRIME, _MASK32)


def hash32_cstring(text: str | BytesLike) -> int:
    """Return the 32-bit FNV-1a digest of `text` up to its first NUL byte.

    `str` input is encoded as UTF-8 first. The terminator is never hashed.
    """
    return _fnv1a(_as_cstring(text), FNV1A_32_OFFSET_BASIS, FNV1A_32_PRIME, _MASK32)


def hash64(data: BytesLike, length: int | None = None) -> int:
    """Return the 64-bit FNV-1a digest of the first `length` bytes of `data`."""
    return _fnv1a(_as_view(data, length), FNV1A_64_OFFSET_BASIS, FNV1A_64_PRIME, _MASK64)


def hash64_cstring(text: str | BytesLike) -> int:
    """Return the 64-bit FNV-1a digest of `text` up to its first NUL byte."""
    return _fnv1a(_as_cstring(text), FNV1A_64_OFFSET_BASIS, FNV1A_64_PRIME, _MASK64)


def fnv1a(data: BytesLike, *, width: int = 64) -> int:
    """Hash a whole buffer at the requested digest width (32 or 64)."""
    if width == 32:
        return hash32(data)
    if width == 64:
        return hash64(data)
    raise ValueError(f"Unsupported FNV-1a width {width!r}; expected 32 or 64")


__all__ = [
    "FNV1A_32_OFFSET_BASIS",
    "FNV1A_32_PRIME",
    "FNV1A_64_OFFSET_BASIS",
    "FNV1A_64_PRIME",
    "fnv1a",
    "hash32",
    "hash32_cstring",
    "hash64",
    "hash64_cstring",
]

"""
Common Utility Helpers.

- Little-endian integer -> bytes serialization for shared secrets.
- Bit-width to byte-length conversion.
- Tagged console logging.
"""


def byte_length(bits: int) -> int:
    """Returns the number of bytes needed to hold `bits` bits."""
    return (bits + 7) // 8


def int_to_le_bytes(value: int, length: int) -> bytes:
    """
    Serializes a nonnegative integer into exactly `length` bytes,
    least significant byte first.

    Byte i of the result is (value >> 8*i) & 0xFF.

    Raises:
        ValueError: If value is negative or needs more than `length` bytes.
    """
    if value < 0:
        raise ValueError("Cannot serialize a negative integer.")
    try:
        return value.to_bytes(length, "little")
    except OverflowError:
        raise ValueError(f"Integer does not fit in {length} bytes.")


def log(tag: str, message: str, verbose: bool = True):
    """Prints a tagged status line, e.g. "[DH] Generated 63-bit prime"."""
    if verbose:
        print(f"[{tag}] {message}")

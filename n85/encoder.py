# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from .alphabet      import  BASE, to_char
from .exceptions    import  OutputTooShort
from .internal      import  bytes_to_int, split_groups

# Four raw bytes become five characters.
GROUP_BYTES = 4
GROUP_CHARS = 5

def encoded_length (input_length):
    """Count the characters needed to encode some number of bytes.

    Each full group of four bytes takes five characters, and a final
    group of one to three bytes takes one character more than its
    length.

    Examples:
        >>> encoded_length(12)
        15
        >>> encoded_length(13)
        17

    """

    full_groups = input_length * GROUP_CHARS // GROUP_BYTES

    if input_length % GROUP_BYTES != 0:
        return full_groups + 1

    return full_groups

def encode (input, output):
    """Encode bytes into a caller-provided buffer.

    Args:
        input (bytes-like):     The raw bytes to encode.

        output (bytearray):     A writable buffer with room for at least
                                ``encoded_length(len(input))`` bytes.
                                Nothing past that many bytes is touched.

    Returns:
        int:                    The number of characters written.

    Raises:
        OutputTooShort:         If `output` is too small. Nothing is
                                written in that case.

    """

    source  = memoryview(input).cast("B")
    target  = memoryview(output).cast("B")

    out_len = encoded_length(len(source))

    if len(target) < out_len:
        raise OutputTooShort(out_len, len(target))

    groups, remainder = split_groups(source, GROUP_BYTES)
    position = 0

    for group in groups:
        position = _write_digits(bytes_to_int(group), GROUP_CHARS,
                                 target, position)

    if remainder:
        # A short group of r bytes is always less than 85 ** (r + 1),
        # so r + 1 digits are enough to hold it.
        position = _write_digits(bytes_to_int(remainder),
                                 len(remainder) + 1,
                                 target, position)

    return position

def encode_bytes (input):
    """Encode bytes and return the N85 string as new bytes.

    Examples:
        >>> encode_bytes(bytes([84]))
        b'}('
        >>> encode_bytes(bytes([85]))
        b'()'

    """

    output = bytearray(encoded_length(len(memoryview(input).cast("B"))))
    encode(input, output)

    return bytes(output)

def _write_digits (value, count, target, position):
    # The least significant digit comes first.
    for i in range(position, position + count):
        target[i]   = to_char(value % BASE)
        value     //= BASE

    return position + count

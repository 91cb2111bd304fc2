# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from .alphabet      import  BASE, to_digit, is_valid_char
from .exceptions    import  InvalidChar, InvalidLength, OutputTooShort
from .internal      import  int_to_bytes, split_groups

# Five characters become four raw bytes.
GROUP_CHARS = 5
GROUP_BYTES = 4

def decoded_length (input_length):
    """Count the bytes an N85 string of some length decodes to.

    Raises:
        InvalidLength:  If the length leaves a single character over;
                        no encoder ever produces that.

    Examples:
        >>> decoded_length(15)
        12
        >>> decoded_length(17)
        13

    """

    if input_length % GROUP_CHARS == 1:
        raise InvalidLength(input_length)

    # This works out for the remainders too: 2, 3 and 4 characters
    # give 1, 2 and 3 bytes.
    return input_length * GROUP_BYTES // GROUP_CHARS

def decode (input, output):
    """Decode an N85 string into a caller-provided buffer.

    Every check happens before anything is written, so `output` is left
    alone whenever an error is raised.

    Args:
        input (bytes-like or str):  The N85 string. It shouldn't have
                                    any whitespace or line breaks.

        output (bytearray):         A writable buffer with room for at
                                    least ``decoded_length(len(input))``
                                    bytes.

    Returns:
        int:                        The number of bytes written.

    Raises:
        InvalidLength:              If ``len(input) % 5 == 1``.

        OutputTooShort:             If `output` is too small.

        InvalidChar:                If anything in `input` is outside
                                    the alphabet. The first such
                                    character is reported.

    """

    if isinstance(input, str):
        source  = input
    else:
        source  = memoryview(input).cast("B")

    target  = memoryview(output).cast("B")

    # Length comes first, then room, then the characters themselves.
    out_len = decoded_length(len(source))

    if len(target) < out_len:
        raise OutputTooShort(out_len, len(target))

    if isinstance(source, str):
        _check_alphabet(ord(c) for c in source)

        # It's all ASCII now.
        source  = memoryview(source.encode("ascii"))

    else:
        _check_alphabet(source)

    groups, remainder = split_groups(source, GROUP_CHARS)
    position = 0

    for group in groups:
        next_position   = position + GROUP_BYTES
        target[position:next_position] = int_to_bytes(
                _read_digits(group), GROUP_BYTES)
        position        = next_position

    if remainder:
        # A short group of r characters carries r - 1 bytes.
        width           = len(remainder) - 1
        next_position   = position + width
        target[position:next_position] = int_to_bytes(
                _read_digits(remainder), width)
        position        = next_position

    return position

def decode_bytes (input):
    """Decode an N85 string and return the result as new bytes.

    Examples:
        >>> decode_bytes(b"}(")
        b'T'
        >>> decode_bytes("()")
        b'U'

    """

    if isinstance(input, str):
        length  = len(input)
    else:
        length  = len(memoryview(input).cast("B"))

    output = bytearray(decoded_length(length))
    decode(input, output)

    return bytes(output)

def _check_alphabet (chars):
    for position, char in enumerate(chars):
        if not is_valid_char(char):
            raise InvalidChar(position, char)

def _read_digits (group):
    # The first character is the least significant digit, so we start
    # from the end.
    value = 0

    for char in reversed(group):
        value   = value * BASE + to_digit(char)

    return value

# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.

BASE        = 85

# Digit zero is `(`. The alphabet runs up through `}`, skipping the
# backslash.
FIRST_CHAR  = b"("[0]
LAST_CHAR   = b"}"[0]
GAP_CHAR    = b"\\"[0]

def to_char (digit):
    """Map a base-85 digit to its N85 character.

    Args:
        digit (int):    A value in ``range(85)``.

    Returns:
        int:            The byte value of the matching character, which
                        is always in ``[0x28, 0x5b]`` or
                        ``[0x5d, 0x7d]``.

    Examples:
        >>> bytes([to_char(0), to_char(51), to_char(52), to_char(84)])
        b'([]}'

    """

    char = FIRST_CHAR + digit

    if char >= GAP_CHAR:
        # Everything from the backslash onward shifts up by one.
        char += 1

    return char

def to_digit (char):
    """Map an N85 character back to its base-85 digit.

    This is the inverse of :func:`to_char`. It assumes the character
    has already been checked with :func:`is_valid_char`; anything
    outside the alphabet gives a meaningless result.

    Args:
        char (int):     The byte value of an N85 character.

    Returns:
        int:            A value in ``range(85)``.

    """

    digit = char - FIRST_CHAR

    if char >= GAP_CHAR:
        digit -= 1

    return digit

def is_valid_char (char):
    return FIRST_CHAR <= char <= LAST_CHAR and char != GAP_CHAR

ALPHABET    = bytes(to_char(d) for d in range(BASE))

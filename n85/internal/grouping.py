# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.

def split_groups (data, size):
    """Split a sliceable sequence into full groups and a remainder.

    Args:
        data (Sequence):    Anything that can be sliced, usually a
                            memoryview so that no bytes are copied.

        size (int):         The length of each full group.

    Returns:
        tuple:              An iterator over the full groups, followed
                            by the remainder group. The remainder is
                            always shorter than `size` and may be empty.

    Examples:
        >>> groups, rest = split_groups(b"abcdefghij", 4)
        >>> list(groups)
        [b'abcd', b'efgh']
        >>> rest
        b'ij'

        When the length divides evenly, the remainder is empty.

        >>> groups, rest = split_groups(b"abcdefgh", 4)
        >>> list(groups), rest
        ([b'abcd', b'efgh'], b'')

    """

    if size < 1:
        raise ValueError("group size must be positive ({:d} given)" \
                .format(size))

    # Everything up to here is made of complete groups.
    even_last   = len(data) - len(data) % size

    groups      = (data[i:i+size] for i in range(0, even_last, size))

    return groups, data[even_last:]

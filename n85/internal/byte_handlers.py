# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.

# Every N85 group is little-endian.
BYTE_ORDER  = "little"

def int_to_bytes (integer, length):
    # Only the low bytes survive. A full group of five characters can
    # describe values a little past 32 bits, and those wrap around.
    mask    = (1 << (8 * length)) - 1
    return (integer & mask).to_bytes(length, BYTE_ORDER)

def bytes_to_int (bytestring):
    return int.from_bytes(bytestring, BYTE_ORDER)

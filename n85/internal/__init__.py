# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from .byte_handlers import int_to_bytes, bytes_to_int
from .grouping      import split_groups

__all__ = [
    "int_to_bytes",
    "bytes_to_int",
    "split_groups",
]

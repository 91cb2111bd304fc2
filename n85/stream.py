# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
import logging

from .decoder   import  decode, GROUP_CHARS
from .encoder   import  encode, encoded_length, GROUP_BYTES

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE  = 1 << 13

def encode_stream (reader, writer, chunk_size = DEFAULT_CHUNK_SIZE):
    """Encode everything from one binary stream into another.

    Args:
        reader:             Anything with a ``read(size)`` method that
                            returns bytes, and returns nothing at the
                            end of the stream.

        writer:             Anything with a ``write(bytes)`` method.

        chunk_size (int):   How many raw bytes to encode at a time. It
                            must be a positive multiple of four.

    Returns:
        int:                The total number of characters written.

    """

    check_chunk_size(chunk_size)

    output  = bytearray(encoded_length(chunk_size))
    total   = 0

    for block in _aligned_blocks(reader, chunk_size, GROUP_BYTES):
        count   = encode(block, output)
        writer.write(output[:count])

        logger.debug("Encoded %d bytes into %d characters",
                     len(block), count)
        total  += count

    return total

def decode_stream (reader, writer, chunk_size = DEFAULT_CHUNK_SIZE):
    """Decode everything from one binary stream into another.

    Encoded blocks are read ``chunk_size * 5 // 4`` characters at a
    time. Whitespace around each block is ignored, which takes care of
    the trailing newline most text files end with.

    Args:
        reader:             Anything with a ``read(size)`` method that
                            returns bytes.

        writer:             Anything with a ``write(bytes)`` method.

        chunk_size (int):   How many decoded bytes to produce at a time.
                            It must be a positive multiple of four.

    Returns:
        int:                The total number of bytes written.

    Raises:
        DecodeError:        If any block isn't valid N85.

    """

    check_chunk_size(chunk_size)

    output  = bytearray(chunk_size)
    total   = 0

    for block in _aligned_blocks(reader, encoded_length(chunk_size),
                                 GROUP_CHARS):
        count   = decode(block.strip(), output)
        writer.write(output[:count])

        logger.debug("Decoded %d characters into %d bytes",
                     len(block), count)
        total  += count

    return total

def check_chunk_size (chunk_size):
    if chunk_size < GROUP_BYTES or chunk_size % GROUP_BYTES != 0:
        raise ValueError("chunk size must be a positive multiple of" \
                " {:d} ({:d} given)".format(GROUP_BYTES, chunk_size))

def _aligned_blocks (reader, size, alignment):
    # `size` is always a multiple of `alignment`, so topping a block up
    # never takes it past `size`.
    while True:
        block       = bytearray(reader.read(size) or b"")

        if not block:
            return

        at_end      = False

        while len(block) % alignment != 0:
            # Short reads happen all the time with pipes. Keep asking
            # until the block lines up or the stream runs dry.
            more    = reader.read(alignment - len(block) % alignment)

            if not more:
                at_end  = True
                break

            block  += more

        yield bytes(block)

        if at_end:
            return

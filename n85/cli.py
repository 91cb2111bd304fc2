# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
import argparse
import logging
import sys

from .exceptions    import  N85Error
from .stream        import  encode_stream, decode_stream, \
                            check_chunk_size, DEFAULT_CHUNK_SIZE

logger = logging.getLogger(__name__)

def build_parser ():
    parser = argparse.ArgumentParser(
        prog="n85",
        description="Encode standard input as N85, or decode it.",
    )

    parser.add_argument(
        "-d", "--decode",
        action="store_true",
        help="Decode N85 input instead of encoding raw bytes.",
    )

    parser.add_argument(
        "--chunk-size",
        type=int,
        default=DEFAULT_CHUNK_SIZE,
        help="Raw bytes per block (a multiple of 4; default {:d})." \
                .format(DEFAULT_CHUNK_SIZE),
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log each block to standard error.",
    )

    return parser

def main (argv = None, stdin = None, stdout = None):
    parser  = build_parser()
    args    = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    try:
        check_chunk_size(args.chunk_size)
    except ValueError as error:
        parser.error(str(error))

    reader  = sys.stdin.buffer if stdin is None else stdin
    writer  = sys.stdout.buffer if stdout is None else stdout

    if args.decode:
        run, unit = decode_stream, "bytes"
    else:
        run, unit = encode_stream, "characters"

    try:
        total = run(reader, writer, args.chunk_size)

    except N85Error as error:
        logger.error("%s", error)
        return 1

    writer.flush()
    logger.debug("Wrote %d %s", total, unit)

    return 0

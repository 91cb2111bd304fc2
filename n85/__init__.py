# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from .alphabet      import  ALPHABET, to_char, to_digit
from .encoder       import  encode, encode_bytes, encoded_length
from .decoder       import  decode, decode_bytes, decoded_length
from .exceptions    import  N85Error, EncodeError, DecodeError, \
                            OutputTooShort, InvalidLength, InvalidChar

__all__ = [
    "ALPHABET",
    "to_char",
    "to_digit",
    "encode",
    "encode_bytes",
    "encoded_length",
    "decode",
    "decode_bytes",
    "decoded_length",

    # Exceptions
    "N85Error",
    "EncodeError",
    "DecodeError",
    "OutputTooShort",
    "InvalidLength",
    "InvalidChar",
]

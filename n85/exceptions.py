# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.

class N85Error (Exception):
    """Root for all N85 errors.

    Note:
        This is meant to never be raised directly. Only its descendents
        will be raised; this is meant only to be caught.

    Examples:
        Child exceptions use their docstring as a message template,
        filled in with whatever arguments they were raised with.

        >>> class MyN85Error (N85Error):
        ...     '''Something went wrong with {:d} bytes.'''
        ...     pass
        ... 
        >>> raise MyN85Error(12)
        Traceback (most recent call last):
          File "<stdin>", line 1, in <module>
        MyN85Error: Something went wrong with 12 bytes.

    """

    def __repr__ (self):
        return "{}({})".format(self.__class__.__name__, repr(str(self)))

    def __str__ (self):
        return self.__doc__.format(*self.args)

class EncodeError (N85Error):
    """Encoding failed."""
    pass

class DecodeError (N85Error):
    """Decoding failed."""
    pass

class OutputTooShort (EncodeError, DecodeError):
    """Output buffer holds {1:d} bytes; {0:d} are required."""

    def __init__ (self, required, available):
        super().__init__(required, available)
        self.required   = required
        self.available  = available

class InvalidLength (DecodeError):
    """No N85 string can be {:d} characters long."""

    def __init__ (self, length):
        super().__init__(length)
        self.length     = length

class InvalidChar (DecodeError):
    """Byte 0x{1:02x} is not an N85 character (position {0:d})."""

    def __init__ (self, position, char):
        super().__init__(position, char)
        self.position   = position
        self.char       = char

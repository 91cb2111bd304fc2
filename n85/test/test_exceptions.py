# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from hamcrest import *
import unittest

from n85.exceptions import N85Error, EncodeError, DecodeError, \
                           OutputTooShort, InvalidLength, InvalidChar

class ExceptionHierarchyTest (unittest.TestCase):

    def test_output_too_short_is_both_kinds_of_error (self):
        error = OutputTooShort(5, 4)
        assert_that(error, instance_of(EncodeError))
        assert_that(error, instance_of(DecodeError))
        assert_that(error, instance_of(N85Error))

    def test_decode_only_errors (self):
        assert_that(InvalidLength(6), instance_of(DecodeError))
        assert_that(InvalidChar(0, 0x5c), instance_of(DecodeError))
        assert_that(InvalidLength(6), is_not(instance_of(EncodeError)))
        assert_that(InvalidChar(0, 0x5c), is_not(instance_of(EncodeError)))

class ExceptionMessageTest (unittest.TestCase):

    def test_output_too_short (self):
        error = OutputTooShort(15, 14)
        assert_that(error, has_properties(required=15, available=14))
        assert_that(str(error), is_(equal_to(
                "Output buffer holds 14 bytes; 15 are required.")))

    def test_invalid_length (self):
        error = InvalidLength(11)
        assert_that(error.length, is_(equal_to(11)))
        assert_that(str(error), is_(equal_to(
                "No N85 string can be 11 characters long.")))

    def test_invalid_char (self):
        error = InvalidChar(3, 0x5c)
        assert_that(error, has_properties(position=3, char=0x5c))
        assert_that(str(error), is_(equal_to(
                "Byte 0x5c is not an N85 character (position 3).")))

    def test_repr_shows_the_message (self):
        assert_that(repr(InvalidLength(1)), is_(equal_to(
                "InvalidLength('No N85 string can be 1 characters long.')")))

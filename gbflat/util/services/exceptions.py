#!/usr/bin/env python
"""This module contains custom exception classes raised when a `GenBank`_
flat file cannot be parsed.

Contents:

.. contents::
   :local:

Exception types
---------------
|MalformedFileError|
    Raised when a file cannot be parsed as expected, and
    execution must halt

|GenbankParseError|
    Base class for all failures raised by :mod:`gbflat.readers`. Each
    subclass below names one way in which a record can be malformed:

    ===============================   ===========================================================
    **Exception**                     **Raised when**
    -------------------------------   -----------------------------------------------------------
    |MalformedData|                   a line's bytes do not decode as text
    |ReachedEndOfLine|                a line is entirely blank where a key was expected
    |UnrecognizedRangeFunction|       a location expression uses a function other than `join`
    |ReachedEndOfRange|               a location expression is truncated or empty
    |ExpectedCommaInRangeFunction|    arguments of `join(...)` are not separated by commas
    |ExpectedInteger|                 a numeric token cannot be read as an integer
    |UnexpectedTokenInFeature|        a qualifier line does not start with `'/'`
    |ReachedEndOfFeature|             a qualifier is missing its closing quote or value
    |ReachedEndOfData|                the record ends before its `ORIGIN` line
    |MalformedLocus|                  the `LOCUS` line does not match the fixed pattern
    |MalformedReference|              a `REFERENCE` block is malformed or lacks a `TITLE`
    |Missing|                         `LOCUS` or `SOURCE` was never seen
    ===============================   ===========================================================

Helper types
------------
|RequiredField|
    Closed set of :class:`~gbflat.genomics.genome.Genome` fields whose absence
    is reported by |Missing|
"""
from enum import Enum



#===============================================================================
# INDEX: Exception classes
#===============================================================================

class MalformedFileError(Exception):
    """Exception class for when files cannot be parsed as they should be
    """

    def __init__(self,filename,message,line_num=None):
        """Create a |MalformedFileError|

        Parameters
        ----------
        filename : str or None
            Name of file causing problem, if known

        message : str
            Message explaining how the file is malformed.

        line_num : int or None, optional
            Number of line causing problems
        """
        Exception.__init__(self,message)
        self.filename = filename
        self.msg      = message
        self.line_num = line_num

    def __str__(self):
        source = "input" if self.filename is None else "file '%s'" % self.filename
        if self.line_num is None:
            return "Error parsing %s: %s" % (source,self.msg)
        else:
            return "Error parsing %s at line %s: %s" % (source,self.line_num,self.msg)


class GenbankParseError(MalformedFileError):
    """Base class for failures raised while parsing a `GenBank`_ record.

    Subclasses define a class-level `message`. Errors are raised where they
    are detected; callers that know more context (e.g. the line on which the
    offending item began) may set `filename` or `line_num` before re-raising.
    """
    message = "malformed GenBank record"

    def __init__(self,message=None,line_num=None,filename=None):
        MalformedFileError.__init__(self,filename,
                                    self.message if message is None else message,
                                    line_num=line_num)


class MalformedData(GenbankParseError):
    message = "line could not be decoded as text"


class ReachedEndOfLine(GenbankParseError):
    message = "expected a key, found a blank line"


class UnrecognizedRangeFunction(GenbankParseError):
    """Raised for location functions other than `join`

    Attributes
    ----------
    name : str
        Function identifier found in the location expression
    """

    def __init__(self,name,**kwargs):
        self.name = name
        GenbankParseError.__init__(self,"unrecognized location function '%s'" % name,**kwargs)


class ReachedEndOfRange(GenbankParseError):
    message = "location expression ended unexpectedly"


class ExpectedCommaInRangeFunction(GenbankParseError):
    message = "expected ',' between arguments of location function"


class ExpectedInteger(GenbankParseError):
    """Raised when a numeric token in a location cannot be converted to :class:`int`

    Attributes
    ----------
    text : str
        Offending token. May be empty.
    """

    def __init__(self,text,**kwargs):
        self.text = text
        GenbankParseError.__init__(self,"expected integer, found '%s'" % text,**kwargs)


class UnexpectedTokenInFeature(GenbankParseError):
    message = "feature qualifiers must each begin a line with '/'"


class ReachedEndOfFeature(GenbankParseError):
    message = "feature qualifier ended unexpectedly"


class ReachedEndOfData(GenbankParseError):
    message = "record ended before ORIGIN"


class MalformedLocus(GenbankParseError):
    message = "LOCUS line does not match expected format"


class MalformedReference(GenbankParseError):
    message = "REFERENCE is malformed or missing required fields"


class RequiredField(Enum):
    """Fields of a |Genome| that must be present in every record"""
    LOCUS  = "locus"
    SOURCE = "source"


class Missing(GenbankParseError):
    """Raised when a required section never appeared in a record

    Attributes
    ----------
    field : |RequiredField|
        The missing field
    """

    def __init__(self,field,**kwargs):
        self.field = RequiredField(field)
        GenbankParseError.__init__(self,"record has no %s" % self.field.value,**kwargs)

#!/usr/bin/env python
"""Recursive-descent parser for feature location expressions, such as
``266..805`` or ``join(266..13468,13468..21555)``.

Grammar::

    expr      := range | function
    range     := digits separator digits
    function  := identifier "(" expr ("," expr)* ")"

where *separator* is any run of non-digit characters (usually ``..``).
Only the `join` function is recognized. Partial markers (``<``, ``>``) and
`complement(...)` around a whole location are handled by the feature parser
in :mod:`gbflat.readers.genbank` before the expression reaches this module.

Parsing advances a shared |Cursor| through the text, so that arguments of a
function are parsed by ordinary recursion rather than by re-tokenizing.

Examples
--------
    >>> parse_location("266..805")
    <RangeSet [266, 806)>

    >>> parse_location("join(1..10,20..30)")
    <RangeSet [1, 11) [20, 31)>
"""
from gbflat.genomics.ranges import RangeSet
from gbflat.util.services.exceptions import ReachedEndOfRange, \
                                            UnrecognizedRangeFunction, \
                                            ExpectedCommaInRangeFunction, \
                                            ExpectedInteger


class Cursor(object):
    """Mutable position within a string

    Attributes
    ----------
    text : str
        Text being parsed

    position : int
        Index of the next unread character
    """

    def __init__(self,text,position=0):
        self.text     = text
        self.position = position

    def at_end(self):
        return self.position >= len(self.text)

    def peek(self):
        """Return the next unread character without consuming it"""
        return self.text[self.position]

    def advance(self):
        """Consume and return the next unread character"""
        char = self.text[self.position]
        self.position += 1
        return char

    def __repr__(self):
        return "<Cursor %r at %s>" % (self.text,self.position)


def _to_int(token):
    try:
        return int(token)
    except ValueError:
        raise ExpectedInteger(token)


def _parse_range(cursor):
    """Parse ``digits separator digits`` into a single inclusive range"""
    current = ""
    while cursor.peek().isnumeric():
        current += cursor.advance()
        if cursor.at_end():
            raise ReachedEndOfRange()

    start = _to_int(current)

    while not cursor.peek().isnumeric():
        cursor.advance()
        if cursor.at_end():
            raise ReachedEndOfRange()

    current = ""
    while not cursor.at_end() and cursor.peek().isnumeric():
        current += cursor.advance()

    end = _to_int(current)
    return RangeSet.from_inclusive(start,end)


def _parse_join(cursor):
    """Parse arguments of ``join(``, through the closing parenthesis"""
    bases = RangeSet()
    ready_for_argument = True
    while True:
        if cursor.at_end():
            raise ReachedEndOfRange()

        char = cursor.peek()
        if char == ")":
            cursor.advance()
            return bases
        elif char == ",":
            cursor.advance()
            ready_for_argument = True
        elif ready_for_argument:
            bases = bases | parse_range_set(cursor)
            ready_for_argument = False
        else:
            raise ExpectedCommaInRangeFunction()


_FUNCTIONS = {
    "join" : _parse_join,
}


def parse_range_set(cursor):
    """Parse one location expression starting at `cursor`, advancing `cursor`
    past it

    Parameters
    ----------
    cursor : |Cursor|
        Position at which the expression begins

    Returns
    -------
    |RangeSet|
        Positions covered by the expression, in 1-based coordinates.
        ``a..b`` is returned as the half-open span ``[a, b+1)``.

    Raises
    ------
    |ReachedEndOfRange|
        if text ends before the expression is complete

    |ExpectedInteger|
        if a numeric token cannot be converted to an integer

    |UnrecognizedRangeFunction|
        if the expression calls a function other than `join`

    |ExpectedCommaInRangeFunction|
        if arguments to a function are not separated by commas
    """
    if cursor.at_end():
        raise ReachedEndOfRange()

    if cursor.peek().isnumeric():
        return _parse_range(cursor)

    current = ""
    while not current.endswith("("):
        if cursor.at_end():
            raise ReachedEndOfRange()
        current += cursor.advance()

    name = current[:-1]
    try:
        func = _FUNCTIONS[name]
    except KeyError:
        raise UnrecognizedRangeFunction(name)

    return func(cursor)


def parse_location(text):
    """Parse a location expression held in `text`

    Parameters
    ----------
    text : str
        Location expression, without partial markers or `complement()`

    Returns
    -------
    |RangeSet|

    See also
    --------
    parse_range_set
        For parsing from a |Cursor| within a longer string
    """
    return parse_range_set(Cursor(text))

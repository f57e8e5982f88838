#!/usr/bin/env python
"""Helpers for turning the lines of a `GenBank`_ record into a tree of
key-value items.

GenBank records nest information by indentation::

    REFERENCE   1  (bases 1 to 29903)
      AUTHORS   Wu,F., Zhao,S., Yu,B., Chen,Y.M., Wang,W., Song,Z.G., Hu,Y.,
                Tao,Z.W., Tian,J.H., Pei,Y.Y., Yuan,M.L., Zhang,Y.L., Dai,F.H.,
                Liu,Y., Wang,Q.M., Zheng,J.J., Xu,L., Holmes,E.C. and Zhang,Y.Z.
      TITLE     A new coronavirus associated with human respiratory disease in
                China
      JOURNAL   Nature 579 (7798), 265-269 (2020)
       PUBMED   32015508

Each item begins with a key. Text after the key is the item's value, and its
column sets the *value indent*. Following lines indented at least that far
continue the value; lines indented past the key but short of the value are
nested items (here, `AUTHORS`, `TITLE`, `JOURNAL`, and `PUBMED` under
`JOURNAL`); and the first line indented no further than the key ends the
item.

Functions & classes
-------------------
:func:`split_lines`
    Split a byte buffer into lines

|MetadataItem|
    One node of the tree

:func:`parse_metadata_item`
    Build the item, including nested children, that starts at a given line
"""
from gbflat.util.services.exceptions import MalformedData, ReachedEndOfLine

NEWLINE = b"\n"


def split_lines(data):
    """Split `data` into lines on newline bytes, omitting empty lines.
    No other normalization (e.g. of carriage returns or tabs) is performed.

    Parameters
    ----------
    data : bytes
        Raw record

    Returns
    -------
    list
        list of :class:`bytes`, without newlines
    """
    return [X for X in bytes(data).split(NEWLINE) if len(X) > 0]


def _indent_of(line):
    """Return the number of leading spaces in `line`, which may be
    :class:`str` or :class:`bytes`"""
    space = b" " if isinstance(line,bytes) else " "
    return len(line) - len(line.lstrip(space))


class MetadataItem(object):
    """Node of the tree built by :func:`parse_metadata_item`

    Attributes
    ----------
    name : str
        Key

    content : str
        Value, with continuation lines joined by newlines and stripped of
        their indentation. Empty if the key was alone on its line.

    children : list
        Nested |MetadataItems|, in order
    """

    def __init__(self,name,content="",children=None):
        self.name     = name
        self.content  = content
        self.children = [] if children is None else children

    def get_children(self,name):
        """Return all children named `name`, in order"""
        return [X for X in self.children if X.name == name]

    def get_last_child(self,name):
        """Return the last child named `name`, or `None`"""
        matches = self.get_children(name)
        return matches[-1] if matches else None

    def __eq__(self,other):
        if not isinstance(other,MetadataItem):
            return NotImplemented
        return (self.name, self.content, self.children) == (other.name, other.content, other.children)

    def __ne__(self,other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None

    def __repr__(self):
        return "MetadataItem(%r, %r, %r)" % (self.name,self.content,self.children)


def _decode(line,encoding):
    try:
        return line.decode(encoding)
    except UnicodeDecodeError:
        raise MalformedData()


def parse_metadata_item(lines,position,encoding="utf-8"):
    """Build the |MetadataItem| whose key is on line `position` of `lines`,
    recursing into nested items

    Parameters
    ----------
    lines : list
        Lines of the record, as :class:`bytes` (see :func:`split_lines`)

    position : int
        Index of line holding the item's key

    encoding : str, optional
        Text encoding of `lines` (Default: `'utf-8'`)

    Returns
    -------
    |MetadataItem|
        The item and its descendants

    int
        Number of lines consumed, including the key line

    Raises
    ------
    |MalformedData|
        if a line cannot be decoded

    |ReachedEndOfLine|
        if line `position` holds no key
    """
    line = _decode(lines[position],encoding)
    key_indent = _indent_of(line)
    if key_indent == len(line):
        raise ReachedEndOfLine()

    key_end = line.find(" ",key_indent)
    if key_end == -1:
        key_end = len(line)

    name = line[key_indent:key_end]
    rest = line[key_end:]
    value_indent = None
    content = ""
    if rest.strip(" "):
        value_indent = key_end + _indent_of(rest)
        content = line[value_indent:]

    children = []
    lines_read = 1
    while position + lines_read < len(lines):
        # indentation is measured on raw bytes. Lines are decoded by the item that consumes them
        next_line = lines[position + lines_read]
        indent = _indent_of(next_line)

        if value_indent is not None and indent >= value_indent:
            content += "\n" + _decode(next_line[indent:],encoding)
            lines_read += 1
        elif indent > key_indent:
            child, child_lines_read = parse_metadata_item(lines,position + lines_read,encoding=encoding)
            children.append(child)
            lines_read += child_lines_read
        else:
            break

    return MetadataItem(name,content,children), lines_read

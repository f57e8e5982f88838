#!/usr/bin/env python
"""Writers, analagous to Unix-style pipes, that filter or format text before
passing it to an output stream, such as :obj:`sys.stderr`.

These are used throughout :data:`gbflat` in place of :mod:`logging`: readers
and command-line scripts accept a `printer` object implementing ``write()``,
and report progress through it.

    :class:`AbstractWriter`
        Base class for all writers. To create a Writer, subclass this and
        override the :py:meth:`~AbstractWriter.filter` method.

    :class:`ColorWriter`
        Enable ANSI coloring of text to output streams that support color.
        For streams that do not support color, text is not colored.

    :class:`NameDateWriter`
        Prepend program name and timestamps to each line of string input before writing

And one convenience function:

    :func:`colored`
        Colorize text (via :func:`termcolor.colored`) if and only
        if color is supported by :obj:`sys.stderr`


Examples
--------
Write to stdout, prepending name and date::

    >>> import sys
    >>> my_writer = NameDateWriter("genbank_summary",stream=sys.stdout)
    >>> my_writer.write("Parsed 12 features")
    genbank_summary [2020-07-18 10:21:03]: Parsed 12 features
"""
import sys
import datetime
from abc import abstractmethod
from io import IOBase

import termcolor

# color detection hint from http://stackoverflow.com/questions/7445658/how-to-detect-if-the-console-does-support-ansi-escape-codes-in-python
if hasattr(sys.stderr,"isatty") and sys.stderr.isatty():
    colored = termcolor.colored
else:
    colored = lambda x, **kwargs: str(x)



#===============================================================================
# INDEX: writers
#===============================================================================

class AbstractWriter(IOBase):
    """Abstract base class for stream-writing filters.
    Create a filter by subclassing this, and defining self.filter().

    Inherits `isatty()` from `self.stream`

    Parameters
    ----------
    stream : file-like, open for writing
        Output stream to which filtered/formatted data will be written
    """
    def __init__(self,stream):
        self.stream = stream

    def isatty(self):
        return hasattr(self.stream,"isatty") and self.stream.isatty()

    def writable(self):
        return True

    def seekable(self):
        return False

    def readable(self):
        return False

    def fileno(self):
        raise IOError()

    def write(self,data):
        """Write data to `self.stream`

        Parameters
        ----------
        data : unit of data
            Whatever data to filter/format. Often string, but not necessary
        """
        self.stream.write(self.filter(data))

    def flush(self):
        """Flush `self.stream`"""
        self.stream.flush()

    def close(self):
        """Flush and close `self.stream`. Standard streams are left open."""
        if self.closed:
            return

        IOBase.close(self)
        if self.stream not in (sys.stdout,sys.stderr):
            self.stream.close()

    @abstractmethod
    def filter(self,data):
        """Method that filters or processes each unit of data.
        Override this in subclasses

        Parameters
        ----------
        data : unit of data
            Whatever data to filter/format. Often string, but not necessarily

        Returns
        -------
        object
            formatted data. Often string, but not necessary
        """
        pass


class ColorWriter(AbstractWriter):
    """Detect whether output stream supports color, and enable/disable colored output

    Parameters
    ----------
    stream : file-like
        Stream to write to (Default: :obj:`sys.stderr`)

    Methods
    -------
    :meth:`color`
        Color text. Delegates to :func:`termcolor.colored` if color is supported.
        Otherwise, returns uncolored text.
    """
    def __init__(self,stream=None):
        stream = sys.stderr if stream is None else stream
        AbstractWriter.__init__(self,stream=stream)
        if self.isatty():
            self.color = termcolor.colored

    def color(self,text,**kwargs):
        """Color `text` with attributes specified in `kwargs` if `stream` supports ANSI color.

        See :func:`termcolor.colored` for usage

        Returns
        -------
        str
            `text`, colored as indicated, if color is supported
        """
        return text

    def filter(self,data):
        return data


class NameDateWriter(ColorWriter):
    """Prepend program name, date, and time to each line of output"""

    def __init__(self,name,line_delimiter="\n",stream=None):
        """Create a NameDateWriter

        Parameters
        ----------
        name : str
            Name to prepend

        stream : file-like
            Stream to write to (Default: :obj:`sys.stderr`)

        line_delimiter : str, optional
            Delimiter, postpended to lines. (Default `'\\n'`)
        """
        ColorWriter.__init__(self,stream=stream)
        self.name = name
        self.delimiter = line_delimiter
        self.fmtstr = "%s %s%s %s%s: {2}%s" % (self.color(name,color="blue",attrs=["bold"]),
                                               self.color("[",color="blue",attrs=["bold"]),
                                               self.color("{0}",color="green"),
                                               self.color("{1}",color="green",attrs=["bold"]),
                                               self.color("]",color="blue",attrs=["bold"]),
                                               self.delimiter
                                              )

    def filter(self,line):
        """Prepend date and time to each line of input

        Parameters
        ----------
        line : str
            Input

        Returns
        -------
        str : Input with date and time prepended
        """
        now = datetime.datetime.now()
        d   = now.strftime("%Y-%m-%d")
        t   = now.strftime("%H:%M:%S")
        return self.fmtstr.format(d,t,line.strip(self.delimiter))

    def __call__(self,line):
        self.write(line)

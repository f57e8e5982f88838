#!/usr/bin/env python
"""Various wrappers and utilities for opening, closing, and reading files.

Important methods
-----------------
:py:func:`opener`
    Guesses whether a file is bzipped, gzipped, or uncompressed based upon
    file extension, opens it appropriately, and returns a file-like object.

:py:func:`read_bytes`
    Buffer the entire contents of a filename or open binary stream

:py:func:`get_short_name`
    Strip directories and extensions from a filename or module name

:py:func:`NullWriter`
    Returns an open filehandle to the system's null location.
"""
import os
import re
from gbflat.util.io.filters import AbstractWriter


class NullWriter(AbstractWriter):
    """Writes to system-dependent null location.
    On Unix-like systems & OSX, this is typically /dev/null. On Windows, simply "nul"
    """

    def __init__(self):
        self.stream = open(os.devnull,"w")

    def filter(self,stream):
        return stream

    def __repr__(self):
        # unusual repr, but useful for documentation by Sphinx
        return "NullWriter()"

    def __str__(self):
        return self.__repr__()


def opener(filename,mode="r",**kwargs):
    """Open a file, detecting whether it is compressed or not, based upon
    its file extension. Extensions are tested in the following order:

       +----------------+------------------+
       | File ends with | Presumed to be   |
       +================+==================+
       | gz             |    gzipped       |
       +----------------+------------------+
       | bz2            |    bzipped       |
       +----------------+------------------+
       | anything else  |    uncompressed  |
       +----------------+------------------+

    Parameters
    ----------
    filename : str
        Name of file to open

    mode : str
        Mode in which to open file. See Python standard
        libarary documentation on file opening modes for
        choices (e.g. "r", "a, "w" with or without "b")

    **kwargs
        Other parameters to pass to appropriate file opener
    """
    if filename.endswith(".gz"):
        import gzip
        if "b" not in mode:
            mode += "b"
        call_func = gzip.GzipFile
    elif filename.endswith(".bz2"):
        import bz2
        if "b" not in mode:
            mode += "b"
        call_func = bz2.BZ2File
    else:
        call_func = open

    return call_func(filename,mode,**kwargs)

def read_bytes(inp):
    """Read the entire contents of a file into memory

    Parameters
    ----------
    inp : str or file-like
        Filename (possibly compressed, see :func:`opener`), or a stream open
        for reading. Text streams are encoded as UTF-8.

    Returns
    -------
    bytes
    """
    if isinstance(inp,str):
        with opener(inp,"rb") as fh:
            return fh.read()

    data = inp.read()
    if isinstance(data,str):
        data = data.encode("utf-8")

    return data

def get_short_name(inpt,separator=os.path.sep,terminator=""):
    """Gives the basename of a filename or module name passed as a string.
    If the string doesn't match the pattern specified by the separator
    and terminator, it is returned unchanged.

    Examples
    --------
    >>> get_short_name("test")
    'test'

    >>> get_short_name("test.py",terminator=".py")
    'test'

    >>> get_short_name("/home/jdoe/NC_045512.gb",terminator=".gb")
    'NC_045512'

    >>> get_short_name("/home/jdoe/test.py.2",terminator=".py")
    'test.py.2'

    >>> get_short_name("gbflat.bin.genbank_summary",separator=r"\\.")
    'genbank_summary'

    Parameters
    ----------
    inpt : str
        Input

    terminator : str
        File terminator (default: "")

    Returns
    -------
    str
    """
    tlen = len(terminator)
    if tlen > 0 and inpt[-tlen:] == terminator:
        inpt = inpt[:-tlen]

    pat = r"([^%s]+)$" % separator
    try:
        stmp = re.search(pat,inpt).group(1)
    except AttributeError:
        return inpt

    return stmp

#!/usr/bin/env python
"""Reformat module docstrings for use as command-line help, by removing
`reStructuredText`_ roles, substitutions and links, and by truncating the text
at the first `numpydoc`_ section header.
"""
import re

pyrst_pattern = re.compile(r"(?P<spacing>^|\s+)(?::(?P<domain>[^:`<>]+))?:(?P<role>[^:`]*):`(?P<argument>[^`<>]+)(?: +<(?P<pointer>[^`]+)>)?`")
"""Matches roles of the form ``:domain:role:`argument``` or ``:role:`argument```"""

subst_pattern = re.compile(r"\|([^|]*)\|")
"""Matches substitutions of the form ``|substitution|``"""

link_pattern = re.compile(r"`([^`<>]+)( <[^`]+>)?`_")
"""Matches link references of the forms ```Linkname`_`` and ```Link text <url>`_``"""

section_pattern = re.compile(r"^\s*(Parameters|Returns|Yields|Raises|Attributes|Examples|See also)\s*$",
                             re.MULTILINE | re.IGNORECASE)
"""Matches `numpydoc`_ section headers, at which help text is truncated"""

_separator = "\n" + (78*"-") + "\n"


def shorten_help(inp):
    """Strip markup from a docstring and cut it at its first `numpydoc`_ section

    Parameters
    ----------
    inp : str
        Module, class or function docstring

    Returns
    -------
    str
        Cleaned help text
    """
    inp = pyrst_pattern.sub(r"\g<spacing>\g<argument>",inp)
    inp = subst_pattern.sub(r"\g<1>",inp)
    inp = link_pattern.sub(r"\g<1>",inp)

    match = section_pattern.search(inp)
    if match is not None:
        inp = inp[:match.start()]

    return inp.strip() + "\n"

def format_module_docstring(inp):
    """Format a module docstring as help text for :class:`argparse.ArgumentParser`,
    surrounded by separators

    Parameters
    ----------
    inp : str
        Module docstring

    Returns
    -------
    str
    """
    return _separator + "\n" + shorten_help(inp) + "\n" + _separator

#!/usr/bin/env python
"""Tests for :py:mod:`gbflat.util.scriptlib.help_formatters`"""
import pytest

from gbflat.util.scriptlib.help_formatters import shorten_help, format_module_docstring

_DOCSTRING = """Summarize a `GenBank`_ flat file as a |Genome|, via :py:func:`~gbflat.readers.genbank.read`
and :class:`GenbankParser`.

See the `NCBI documentation <https://www.ncbi.nlm.nih.gov/genbank/>`_.

Parameters
----------
infile : str
    Input file
"""

@pytest.mark.unit
def test_shorten_help_removes_markup_and_sections():
    expected = ("Summarize a GenBank flat file as a Genome, via ~gbflat.readers.genbank.read\n"
                "and GenbankParser.\n\n"
                "See the NCBI documentation.\n")
    assert shorten_help(_DOCSTRING) == expected

@pytest.mark.unit
def test_shorten_help_without_sections():
    assert shorten_help("  Just text.  ") == "Just text.\n"

@pytest.mark.unit
def test_format_module_docstring_has_separators():
    found = format_module_docstring("Some help.")
    lines = found.split("\n")
    assert lines[1] == "-" * 78
    assert lines[-2] == "-" * 78
    assert "Some help." in lines

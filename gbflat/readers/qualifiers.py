#!/usr/bin/env python
"""Parse the qualifiers that annotate a feature in a `GenBank`_ feature table.

Qualifiers follow a feature's location, one per line::

    /gene="ORF1ab"
    /codon_start=1
    /ribosomal_slippage
    /note="pp1ab; translated by -1 ribosomal frameshift"

Three forms are recognized:

    ========================   ===================================================
    **Form**                   **Value**
    ------------------------   ---------------------------------------------------
    ``/key="text"``            `text`, up to the next double quote. May span
                               lines; embedded quotes are not escaped.
    ``/key=text``              `text`, up to the end of the line
    ``/key``                   `''` (a flag)
    ========================   ===================================================

If a key appears more than once, the last value wins.
"""
from gbflat.util.services.exceptions import UnexpectedTokenInFeature, ReachedEndOfFeature


def parse_qualifiers(inp):
    """Parse qualifier lines of a feature into a dictionary

    Examples
    --------
        >>> parse_qualifiers('/gene="ORF1"\\n/pseudo')
        {'gene': 'ORF1', 'pseudo': ''}

        >>> parse_qualifiers('/codon_start=1\\n/product="ORF1ab polyprotein"')
        {'codon_start': '1', 'product': 'ORF1ab polyprotein'}

    Parameters
    ----------
    inp : str
        Qualifier lines, joined by newlines

    Returns
    -------
    dict
        Qualifier names mapped to string values

    Raises
    ------
    |UnexpectedTokenInFeature|
        if a qualifier does not begin with `'/'`, or text follows the closing
        quote of a value on the same line

    |ReachedEndOfFeature|
        if a quoted value is never closed, or `'='` ends the text
    """
    d = {}
    current = 0
    end = len(inp)
    while current < end:
        if inp[current] != "/":
            raise UnexpectedTokenInFeature()

        newline = inp.find("\n",current)
        if newline == -1:
            newline = end

        equals = inp.find("=",current,newline)
        if equals == -1:
            # flag
            d[inp[current+1:newline]] = ""
            current = newline
        else:
            key = inp[current+1:equals]
            value_start = equals + 1
            if value_start == end:
                raise ReachedEndOfFeature()

            if inp[value_start] == '"':
                value_end = inp.find('"',value_start + 1)
                if value_end == -1:
                    raise ReachedEndOfFeature()
                d[key] = inp[value_start+1:value_end]
                current = value_end + 1
            else:
                d[key] = inp[value_start:newline]
                current = newline

        if current < end:
            if inp[current] != "\n":
                raise UnexpectedTokenInFeature()
            current += 1

    return d

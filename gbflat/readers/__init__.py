#!/usr/bin/env python
"""
Package overview
================

This package contains the parser for `GenBank`_ flat files. Parsed positions
are reported as written in the record (1-based), held as half-open spans.

    =================================    ==========================================
    **Module**                           **Contents**
    ---------------------------------    ------------------------------------------
    :mod:`gbflat.readers.genbank`        |GenbankParser|, :func:`~gbflat.readers.genbank.parse`,
                                         and :func:`~gbflat.readers.genbank.read`

    :mod:`gbflat.readers.common`         Line splitting, and grouping of lines into
                                         a tree of items by indentation

    :mod:`gbflat.readers.locations`      Parser for location expressions
                                         (e.g. ``join(1..10,20..30)``)

    :mod:`gbflat.readers.qualifiers`     Parser for ``/key=value`` feature qualifiers
    =================================    ==========================================
"""

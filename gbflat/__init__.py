#!/usr/bin/env python
"""Welcome to gbflat!

This package reads `GenBank`_ flat-file records into Python objects:
the `LOCUS` header, free-form metadata, literature references, the feature
table with its location expressions and qualifiers, and the nucleotide
sequence, stored at two bits per base.

Reading a record takes one call::

    >>> import gbflat
    >>> genome = gbflat.read("NC_045512.gb")
    >>> genome.locus.name, len(genome.sequence)
    ('NC_045512', 29903)


Package overview
----------------
gbflat is divided into the following subpackages:

    ==============    =========================================================
    Package           Contents
    --------------    ---------------------------------------------------------
    |bin|             Command-line scripts
    |genomics|        Object types describing records, features, and sequences
    |readers|         The `GenBank`_ parser and its helpers
    |util|            Utilities (e.g. exceptions, output writers, file openers)
    |test|            Unit and functional tests
    ==============    =========================================================

"""
__version__ = "0.1.0"

from gbflat.genomics.genome import Genome, Locus, Source, Reference, Feature, \
                                   Journal, Published, Unpublished, UNPUBLISHED, \
                                   BaseCompletion, MetadataKey
from gbflat.genomics.ranges import RangeSet
from gbflat.genomics.sequence import BasePair, GeneSequence, GeneSequenceSlice

from gbflat.readers.genbank import GenbankParser, parse, read

from gbflat.util.services.exceptions import GenbankParseError, Missing, RequiredField

#!/usr/bin/env python
"""Read records from `GenBank`_ flat files into |Genome| objects.

A record is parsed in one pass. Its lines are first grouped into a tree of
|MetadataItems| by indentation (see :mod:`gbflat.readers.common`). Each
top-level item is then dispatched by name:

    ==============   ==========================================================
    **Item**         **Handled by**
    --------------   ----------------------------------------------------------
    `LOCUS`          :func:`parse_locus`, giving :attr:`Genome.locus`
    `SOURCE`         :func:`parse_source`, giving :attr:`Genome.source`
    `REFERENCE`      :func:`parse_reference`, appended to :attr:`Genome.references`
    `FEATURES`       :func:`parse_feature` on each child, appended to :attr:`Genome.features`
    `ORIGIN`         ends the header. All following bytes are read as sequence.
    anything else    stored as text in :attr:`Genome.metadata`
    ==============   ==========================================================

In the sequence, only the lower-case letters `a`, `c`, `g`, and `t` are
kept. Position numbers, spaces, the terminating `//`, and any other byte
are skipped.

Errors
------
Any problem raises a subclass of |GenbankParseError| at the point of
detection. No partial |Genome| is ever returned.

Examples
--------
Parse a file::

    >>> genome = read("NC_045512.gb")
    >>> genome.locus
    Locus(name='NC_045512', sequence_length=29903, molecule_type='ss-RNA', division='VRL', modified='18-JUL-2020', topology='linear')
    >>> str(genome.sequence[:10])
    'attaaaggtt'

Or parse bytes that are already in memory, reporting progress::

    >>> parser = GenbankParser(printer=NameDateWriter("example"))
    >>> genome = parser.parse(data)
"""
import re

import numpy

from gbflat.genomics.genome import Genome, Locus, Source, Reference, Feature, \
                                   Published, UNPUBLISHED, BaseCompletion
from gbflat.genomics.sequence import GeneSequence, BasePair
from gbflat.readers.common import split_lines, parse_metadata_item
from gbflat.readers.locations import parse_location
from gbflat.readers.qualifiers import parse_qualifiers
from gbflat.util.io.openers import NullWriter, read_bytes
from gbflat.util.services.exceptions import GenbankParseError, \
                                            ReachedEndOfRange, \
                                            ReachedEndOfData, \
                                            MalformedLocus, \
                                            MalformedReference, \
                                            Missing, \
                                            RequiredField


#===============================================================================
# INDEX: constants
#===============================================================================

LOCUS_PATTERN = re.compile(r"^([^ ]+) +([0-9]+) bp +([^ ]+) +(?:(linear|circular) +)?([A-Z]{3}) +(.+)$")
"""Fields of the `LOCUS` line: name, length, molecule type, optional topology,
division, and modification date"""

REFERENCE_PATTERN = re.compile(r"^([0-9]+) +\(bases ([0-9]+) to ([0-9]+)\)$")
"""Reference number and base range from the first line of a `REFERENCE` block"""

COMPLEMENT_PREFIX = "complement("

ORIGIN_KEY = b"ORIGIN"
"""Key, at column 0, of the line after which all bytes are sequence"""

INVALID_BASE = 255

ALPHABET = numpy.full(256,INVALID_BASE,dtype=numpy.uint8)
"""Lookup table from byte value to 2-bit |BasePair| code. Bytes that are not
one of ``b"acgt"`` map to :data:`INVALID_BASE`."""
for _base in BasePair:
    ALPHABET[ord(str(_base))] = _base.value


#===============================================================================
# INDEX: field parsers
#===============================================================================

def parse_locus(inp):
    """Parse the value of a `LOCUS` item

    Examples
    --------
        >>> parse_locus("NC_045512 29903 bp ss-RNA linear VRL 18-JUL-2020")
        Locus(name='NC_045512', sequence_length=29903, molecule_type='ss-RNA', division='VRL', modified='18-JUL-2020', topology='linear')

    Parameters
    ----------
    inp : str
        Text following the `LOCUS` key

    Returns
    -------
    |Locus|

    Raises
    ------
    |MalformedLocus|
        if `inp` does not match :data:`LOCUS_PATTERN`
    """
    match = LOCUS_PATTERN.match(inp)
    if match is None:
        raise MalformedLocus()

    name, length, molecule_type, topology, division, modified = match.groups()
    return Locus(name,int(length),molecule_type,division,modified,topology=topology)

def parse_source(item):
    """Build a |Source| from a `SOURCE` item. If `ORGANISM` appears more than
    once, the last is used.

    Parameters
    ----------
    item : |MetadataItem|

    Returns
    -------
    |Source|
    """
    organism = item.get_last_child("ORGANISM")
    return Source(item.content,None if organism is None else organism.content)

def _parse_journal(item):
    if item.content == "Unpublished":
        return UNPUBLISHED

    pubmed = item.get_last_child("PUBMED")
    pubmed_id = None
    if pubmed is not None and pubmed.content.isdecimal():
        pubmed_id = int(pubmed.content)

    return Published(item.content,pubmed=pubmed_id)

def parse_reference(item):
    """Build a |Reference| from a `REFERENCE` item

    Parameters
    ----------
    item : |MetadataItem|
        Item whose content is e.g. ``'1  (bases 1 to 29903)'``, with children
        `TITLE`, `JOURNAL`, and optionally `AUTHORS` and `CONSRTM`

    Returns
    -------
    |Reference|

    Raises
    ------
    |MalformedReference|
        if the content does not match :data:`REFERENCE_PATTERN`, or there is
        no `TITLE` or no `JOURNAL`
    """
    match = REFERENCE_PATTERN.match(item.content)
    if match is None:
        raise MalformedReference()

    ref_id, start, end = (int(X) for X in match.groups())

    fields = { "TITLE" : None, "AUTHORS" : None, "CONSRTM" : None }
    journal = None
    for child in item.children:
        if child.name in fields:
            fields[child.name] = child.content
        elif child.name == "JOURNAL":
            journal = _parse_journal(child)

    if fields["TITLE"] is None:
        raise MalformedReference("REFERENCE %s has no TITLE" % ref_id)
    if journal is None:
        raise MalformedReference("REFERENCE %s has no JOURNAL" % ref_id)

    return Reference(ref_id,
                     range(start,end + 1),
                     fields["TITLE"],
                     journal,
                     authors=fields["AUTHORS"],
                     consortium=fields["CONSRTM"])

def parse_feature(item):
    """Build a |Feature| from an item in the `FEATURES` table

    The first line of the item's content is the location. Its completion is
    determined, in order of precedence, by:

        ===============================   =================   ====================
        **First line**                    **Completion**      **Text parsed**
        -------------------------------   -----------------   --------------------
        starts with ``<``                 partial5            without first char
        ends with ``>``                   partial3            without last char
        ``complement(...)``               complement          inside parentheses
        anything else                     complete            unchanged
        ===============================   =================   ====================

    Remaining lines are qualifiers (see :func:`~gbflat.readers.qualifiers.parse_qualifiers`).

    Parameters
    ----------
    item : |MetadataItem|
        Item whose name is the feature type

    Returns
    -------
    |Feature|

    Raises
    ------
    |ReachedEndOfRange|
        if the location is empty, truncated, or `complement(` is unclosed

    |GenbankParseError|
        other subclasses, from location or qualifier parsing
    """
    location, _, qualifiers = item.content.partition("\n")

    if location.startswith("<"):
        completion = BaseCompletion.PARTIAL5
        location = location[1:]
    elif location.endswith(">"):
        completion = BaseCompletion.PARTIAL3
        location = location[:-1]
    elif location.startswith(COMPLEMENT_PREFIX):
        if not location.endswith(")"):
            raise ReachedEndOfRange()
        completion = BaseCompletion.COMPLEMENT
        location = location[len(COMPLEMENT_PREFIX):-1]
    else:
        completion = BaseCompletion.COMPLETE

    if len(location) == 0:
        raise ReachedEndOfRange()

    return Feature(item.name,
                   parse_location(location),
                   completion,
                   parse_qualifiers(qualifiers))

def decode_sequence(lines):
    """Decode sequence lines into a |GeneSequence|, skipping any byte that is
    not one of ``b"acgt"``

    Parameters
    ----------
    lines : list
        Lines as :class:`bytes`

    Returns
    -------
    |GeneSequence|
    """
    data = numpy.frombuffer(b"".join(lines),dtype=numpy.uint8)
    codes = ALPHABET[data]
    return GeneSequence.from_codes(codes[codes != INVALID_BASE])


#===============================================================================
# INDEX: record assembly
#===============================================================================

class GenbankParser(object):
    """Parse `GenBank`_ records into |Genome| objects.

    Parsers hold no state between calls to :meth:`parse`, so a single
    parser may be reused.

    Parameters
    ----------
    encoding : str, optional
        Encoding used to decode each line (Default: `'utf-8'`)

    printer : file-like, optional
        Logger implementing a ``write()`` method. Default: |NullWriter|

    Attributes
    ----------
    encoding : str
        Text encoding of records

    printer : file-like
        Logger implementing a ``write()`` method
    """

    def __init__(self,encoding="utf-8",printer=None):
        self.encoding = encoding
        self.printer  = NullWriter() if printer is None else printer

    def __repr__(self):
        return "<GenbankParser encoding=%r>" % self.encoding

    def parse(self,data,filename=None):
        """Parse a single record

        Parameters
        ----------
        data : bytes
            Complete record

        filename : str, optional
            Name of the file `data` came from, used in error messages

        Returns
        -------
        |Genome|

        Raises
        ------
        |GenbankParseError|
            A subclass naming the first problem found. If raised while
            parsing a top-level item, `line_num` gives the 0-based index
            (among non-empty lines) of the item's first line.
        """
        try:
            return self._parse(data)
        except GenbankParseError as e:
            if e.filename is None:
                e.filename = filename
            raise

    def _parse(self,data):
        lines = split_lines(data)
        self.printer.write("Read %s lines" % len(lines))

        locus      = None
        source     = None
        references = []
        features   = []
        metadata   = {}

        current = 0
        while True:
            if current >= len(lines):
                raise ReachedEndOfData(line_num=current)

            if lines[current].split(b" ",1)[0] == ORIGIN_KEY:
                break

            try:
                item, lines_read = parse_metadata_item(lines,current,encoding=self.encoding)
                if item.name == "LOCUS":
                    locus = parse_locus(item.content)
                elif item.name == "SOURCE":
                    source = parse_source(item)
                elif item.name == "REFERENCE":
                    references.append(parse_reference(item))
                elif item.name == "FEATURES":
                    features.extend(parse_feature(X) for X in item.children)
                    self.printer.write("Parsed %s features" % len(item.children))
                else:
                    metadata[item.name] = item.content
            except GenbankParseError as e:
                if e.line_num is None:
                    e.line_num = current
                raise

            current += lines_read

        if locus is None:
            raise Missing(RequiredField.LOCUS)
        if source is None:
            raise Missing(RequiredField.SOURCE)

        sequence = decode_sequence(lines[current:])
        self.printer.write("Decoded %s bases for %s (%s references, %s features)" % (len(sequence),
                                                                                    locus.name,
                                                                                    len(references),
                                                                                    len(features)))

        return Genome(locus,metadata,source,references,features,sequence)


#===============================================================================
# INDEX: convenience functions
#===============================================================================

def parse(data,**kwargs):
    """Parse a single `GenBank`_ record held in memory

    Parameters
    ----------
    data : bytes
        Complete record

    **kwargs
        Keyword arguments passed to |GenbankParser|

    Returns
    -------
    |Genome|

    Raises
    ------
    |GenbankParseError|
        if the record is malformed
    """
    return GenbankParser(**kwargs).parse(data)

def read(inp,**kwargs):
    """Read a single `GenBank`_ record from a file

    Parameters
    ----------
    inp : str or file-like
        Filename (optionally gzipped or bzipped) or open stream

    **kwargs
        Keyword arguments passed to |GenbankParser|

    Returns
    -------
    |Genome|

    Raises
    ------
    |GenbankParseError|
        if the record is malformed
    """
    filename = inp if isinstance(inp,str) else getattr(inp,"name",None)
    return GenbankParser(**kwargs).parse(read_bytes(inp),filename=filename)

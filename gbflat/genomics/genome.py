#!/usr/bin/env python
"""Object types describing a parsed `GenBank`_ record.

Important classes
-----------------
|Genome|
    A whole record: its |Locus| header, free-form metadata, |Source|,
    |References|, |Features|, and nucleotide sequence (a |GeneSequence|)

|Locus|
    Fields of the `LOCUS` header line

|Source|
    Organism description from the `SOURCE` block

|Reference|
    A citation from a `REFERENCE` block, with its |Journal|

|Feature|
    An annotated region from the `FEATURES` table. Its positions are held
    in a |RangeSet|; its |BaseCompletion| records whether the location was
    partial or on the complementary strand.

Coordinates
-----------
Positions are those written in the record: 1-based, with a location
``a..b`` covering bases `a` through `b` inclusive. These are stored as
half-open spans ``[a, b+1)``, so ``a..b`` corresponds to ``range(a, b+1)``.
To index into :attr:`Genome.sequence`, which is 0-based, subtract one.
"""
from enum import Enum


class MetadataKey(object):
    """Names of commonly occurring top-level keys in :attr:`Genome.metadata`.

    Records may contain any other key too; :attr:`Genome.metadata` is an
    ordinary :class:`dict` keyed by whatever names appear in the record.
    """
    DEFINITION = "DEFINITION"
    ACCESSION  = "ACCESSION"
    VERSION    = "VERSION"
    KEYWORDS   = "KEYWORDS"
    COMMENT    = "COMMENT"
    DBLINK     = "DBLINK"


class BaseCompletion(Enum):
    """How a feature's location was qualified in the record"""
    COMPLETE   = "complete"
    PARTIAL5   = "partial5"
    PARTIAL3   = "partial3"
    COMPLEMENT = "complement"


class _Record(object):
    """Equality, inequality and `repr` from a fixed list of attribute names"""
    _fields = ()

    def __eq__(self,other):
        if type(other) is not type(self):
            return NotImplemented
        return all(getattr(self,X) == getattr(other,X) for X in self._fields)

    def __ne__(self,other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None

    def __repr__(self):
        return "%s(%s)" % (self.__class__.__name__,
                           ", ".join("%s=%r" % (X,getattr(self,X)) for X in self._fields))


class Locus(_Record):
    """Fields of the `LOCUS` line

    Attributes
    ----------
    name : str
        Locus name, usually the accession (e.g. `'NC_045512'`)

    sequence_length : int
        Length declared in the header. This is not checked against the
        length of :attr:`Genome.sequence`.

    molecule_type : str
        e.g. `'DNA'`, `'mRNA'`, `'ss-RNA'`

    division : str
        Three-letter GenBank division code (e.g. `'VRL'`)

    modified : str
        Modification date, as written (e.g. `'18-JUL-2020'`)

    topology : str or None
        `'linear'` or `'circular'`, if given
    """
    _fields = ("name","sequence_length","molecule_type","division","modified","topology")

    def __init__(self,name,sequence_length,molecule_type,division,modified,topology=None):
        self.name            = name
        self.sequence_length = sequence_length
        self.molecule_type   = molecule_type
        self.division        = division
        self.modified        = modified
        self.topology        = topology


class Source(_Record):
    """Organism from which a record was derived

    Attributes
    ----------
    name : str
        Free-text organism description

    organism : str or None
        Formal name and taxonomic lineage, from the `ORGANISM` sub-block
    """
    _fields = ("name","organism")

    def __init__(self,name,organism=None):
        self.name     = name
        self.organism = organism


class Journal(object):
    """Base class for where a |Reference| appeared"""
    published = False


class Unpublished(Journal):
    """Journal of a reference marked `Unpublished`. Use :data:`UNPUBLISHED`."""

    def __eq__(self,other):
        return isinstance(other,Unpublished)

    def __ne__(self,other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(Unpublished)

    def __repr__(self):
        return "UNPUBLISHED"


UNPUBLISHED = Unpublished()


class Published(Journal,_Record):
    """Journal citation of a published reference

    Attributes
    ----------
    title : str
        Citation text of the `JOURNAL` line

    pubmed : int or None
        PubMed identifier, if given
    """
    published = True
    _fields = ("title","pubmed")

    def __init__(self,title,pubmed=None):
        self.title  = title
        self.pubmed = pubmed


class Reference(_Record):
    """Citation from a `REFERENCE` block

    Attributes
    ----------
    id : int
        Reference number within the record

    bases : range
        Bases the reference applies to. ``(bases 1 to 29903)`` is stored as
        ``range(1, 29904)``.

    authors : str or None
        Contents of `AUTHORS`

    consortium : str or None
        Contents of `CONSRTM`

    title : str
        Contents of `TITLE`

    journal : |Journal|
        :data:`UNPUBLISHED`, or a |Published| journal citation
    """
    _fields = ("id","bases","authors","consortium","title","journal")

    def __init__(self,id,bases,title,journal,authors=None,consortium=None):
        self.id         = id
        self.bases      = bases
        self.authors    = authors
        self.consortium = consortium
        self.title      = title
        self.journal    = journal


class Feature(_Record):
    """Annotated region from the `FEATURES` table

    Attributes
    ----------
    type : str
        Feature key, e.g. `'gene'`, `'CDS'`, `'5\\'UTR'`

    bases : |RangeSet|
        Positions covered by the feature

    completion : |BaseCompletion|
        Whether the location was complete, 5'- or 3'-partial, or on the
        complementary strand

    qualifiers : dict
        Qualifier names mapped to their values. Flag qualifiers (e.g.
        `/pseudo`) map to `''`.
    """
    _fields = ("type","bases","completion","qualifiers")

    def __init__(self,type,bases,completion=BaseCompletion.COMPLETE,qualifiers=None):
        self.type       = type
        self.bases      = bases
        self.completion = completion
        self.qualifiers = {} if qualifiers is None else qualifiers

    def get_name(self):
        """Return a display name for the feature, taken from the first of
        its `gene`, `locus_tag`, `product` or `note` qualifiers that is
        present, or `None`
        """
        for key in ("gene","locus_tag","product","note"):
            if key in self.qualifiers:
                return self.qualifiers[key]

        return None


class Genome(_Record):
    """A parsed `GenBank`_ record

    Attributes
    ----------
    locus : |Locus|
        Header

    metadata : dict
        Contents of every top-level block not modelled elsewhere, keyed by
        block name (see |MetadataKey|). Continuation lines are joined with
        newlines.

    source : |Source|
        Organism

    references : list
        |References|, in record order

    features : list
        |Features|, in record order

    sequence : |GeneSequence|
        Nucleotide sequence, 0-indexed
    """
    _fields = ("locus","metadata","source","references","features","sequence")

    def __init__(self,locus,metadata,source,references,features,sequence):
        self.locus      = locus
        self.metadata   = metadata
        self.source     = source
        self.references = references
        self.features   = features
        self.sequence   = sequence

    def __repr__(self):
        return "<Genome %s: %s references, %s features, %s bases>" % (self.locus.name,
                                                                      len(self.references),
                                                                      len(self.features),
                                                                      len(self.sequence))

    def get_sequence(self,bases):
        """Return the sequence under a set of positions as a string

        Parameters
        ----------
        bases : |RangeSet| or range
            Positions in record (1-based) coordinates, e.g.
            :attr:`Feature.bases` or :attr:`Reference.bases`

        Returns
        -------
        str
            Letters of each span, in positional order, joined together

        Raises
        ------
        IndexError
            if any position lies outside ``[1, len(self.sequence)]``
        """
        spans = [(bases.start,bases.stop)] if isinstance(bases,range) else bases.ranges
        spans = [(X,Y) for X, Y in spans if Y > X]
        for X, Y in spans:
            if X < 1 or Y - 1 > len(self.sequence):
                raise IndexError("Positions %s..%s outside sequence of length %s" % (X,Y-1,len(self.sequence)))

        return "".join(str(self.sequence.slice(X-1,Y-1)) for X, Y in spans)

#!/usr/bin/env python
"""Summarize a `GenBank`_ flat file: its locus, metadata, organism,
references, and a count of features by type. Optionally list every feature
with its location and name, and print the nucleotide sequence.

Output is tab-delimited where tabular, and written to `outfile`, or to
standard out if no output file is given.
"""
from gbflat.readers.genbank import GenbankParser
from gbflat.util.io.filters import NameDateWriter, colored
from gbflat.util.io.openers import get_short_name, opener, read_bytes
from gbflat.util.scriptlib.help_formatters import format_module_docstring
from gbflat.util.services.exceptions import GenbankParseError
from collections import Counter
import argparse
import inspect
import sys

printer = NameDateWriter(get_short_name(inspect.stack()[-1][1]))


def format_genome(genome,show_features=False,show_sequence=False,width=60):
    """Format a |Genome| as human-readable text

    Parameters
    ----------
    genome : |Genome|
        Parsed record

    show_features : bool, optional
        If `True`, list every feature (Default: `False`)

    show_sequence : bool, optional
        If `True`, include the sequence (Default: `False`)

    width : int, optional
        Bases per line of sequence output (Default: 60)

    Returns
    -------
    str
    """
    locus = genome.locus
    ltmp = ["## locus",
            "name\t%s" % locus.name,
            "declared_length\t%s" % locus.sequence_length,
            "sequence_length\t%s" % len(genome.sequence),
            "molecule_type\t%s" % locus.molecule_type,
            "topology\t%s" % (locus.topology or "."),
            "division\t%s" % locus.division,
            "modified\t%s" % locus.modified,
            "",
            "## source",
            "name\t%s" % genome.source.name,
            "organism\t%s" % (genome.source.organism or ".").split("\n")[0],
            "",
            "## metadata",
           ]
    for key, value in genome.metadata.items():
        ltmp.append("%s\t%s" % (key," ".join(value.split("\n"))))

    ltmp.extend(["","## references","#id\tstart\tend\tpubmed\ttitle"])
    for ref in genome.references:
        pubmed = getattr(ref.journal,"pubmed",None)
        ltmp.append("%s\t%s\t%s\t%s\t%s" % (ref.id,
                                            ref.bases.start,
                                            ref.bases.stop - 1,
                                            "." if pubmed is None else pubmed,
                                            " ".join(ref.title.split("\n"))))

    counts = Counter(X.type for X in genome.features)
    ltmp.extend(["","## feature counts","#type\tcount"])
    for ftype in sorted(counts):
        ltmp.append("%s\t%s" % (ftype,counts[ftype]))

    if show_features == True:
        ltmp.extend(["","## features","#type\tlocation\tcompletion\tlength\tname"])
        for feature in genome.features:
            name = feature.get_name()
            ltmp.append("%s\t%s\t%s\t%s\t%s" % (feature.type,
                                                feature.bases,
                                                feature.completion.value,
                                                len(feature.bases),
                                                "." if name is None else name))

    if show_sequence == True:
        seqstr = str(genome.sequence)
        ltmp.extend(["","## sequence"])
        ltmp.extend(seqstr[X:X+width] for X in range(0,len(seqstr),width))

    return "\n".join(ltmp) + "\n"


def main(argv=sys.argv[1:]):
    """Command-line program

    Parameters
    ----------
    argv : list, optional
        A list of command-line arguments, which will be processed
        as if the script were called from the command line if
        :py:func:`main` is called directly.

        Default: `sys.argv[1:]`. The command-line arguments, if the script is
        invoked from the command line

    Returns
    -------
    int
        Exit status: 0 on success, 1 if the record could not be parsed
    """
    parser = argparse.ArgumentParser(description=format_module_docstring(__doc__),
                                     formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--features",default=False,action="store_true",
                        help="List every feature, with its location and name")
    parser.add_argument("--sequence",default=False,action="store_true",
                        help="Include the nucleotide sequence in output")
    parser.add_argument("--width",type=int,default=60,metavar="N",
                        help="Bases per line of sequence output (Default: 60)")
    parser.add_argument("--encoding",type=str,default="utf-8",
                        help="Text encoding of input (Default: utf-8)")
    parser.add_argument("infile",metavar="infile.gb",type=str,
                        help="Input GenBank file. Use '-' for standard in.")
    parser.add_argument("outfile",metavar="outfile.txt",type=str,nargs="?",default=None,
                        help="Output file (Default: standard out)")

    args = parser.parse_args(argv)
    if args.width < 1:
        parser.error("--width must be a positive integer")

    printer.write("Opening %s..." % args.infile)
    data = read_bytes(sys.stdin.buffer if args.infile == "-" else args.infile)

    try:
        genome = GenbankParser(encoding=args.encoding,printer=printer).parse(data,filename=args.infile)
    except GenbankParseError as e:
        printer.write(colored("%s: %s" % (e.__class__.__name__,e),color="red",attrs=["bold"]))
        return 1

    text = format_genome(genome,show_features=args.features,show_sequence=args.sequence,width=args.width)
    if args.outfile is None:
        sys.stdout.write(text)
    else:
        printer.write("Writing %s..." % args.outfile)
        with opener(args.outfile,"wt") as fout:
            fout.write(text)

    printer.write("Done.")
    return 0

if __name__ == "__main__":
    sys.exit(main())

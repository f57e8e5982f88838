#!/usr/bin/env python
"""Test suite for :py:mod:`gbflat.bin.genbank_summary`"""
import os
import shutil
import tempfile

import pytest

from gbflat.bin.genbank_summary import main
from gbflat.test.ref_files import REF_FILES, MINI

#===============================================================================
# INDEX: helpers
#===============================================================================

@pytest.fixture
def tempdir():
    dirname = tempfile.mkdtemp(prefix="genbank_summary")
    yield dirname
    shutil.rmtree(dirname)

def _run(tempdir,*args):
    outfile = os.path.join(tempdir,"summary.txt")
    status = main(list(args) + [REF_FILES["mini_gb"],outfile])
    with open(outfile) as fh:
        lines = fh.read().split("\n")
    return status, lines

def _section(lines,name):
    start = lines.index("## %s" % name) + 1
    try:
        end = lines.index("",start)
    except ValueError:
        end = len(lines)
    return lines[start:end]


#===============================================================================
# INDEX: tests
#===============================================================================

@pytest.mark.functional
def test_summary_sections(tempdir):
    status, lines = _run(tempdir)
    assert status == 0

    locus = _section(lines,"locus")
    assert "name\t%s" % MINI["name"] in locus
    assert "declared_length\t180" in locus
    assert "sequence_length\t180" in locus
    assert "topology\tlinear" in locus

    assert _section(lines,"source") == ["name\tsynthetic construct","organism\tsynthetic construct"]
    assert [X.split("\t")[0] for X in _section(lines,"metadata")] == MINI["metadata_keys"]
    assert "COMMENT\tThis record is entirely synthetic. It spans three lines of comment text." in _section(lines,"metadata")

    assert _section(lines,"references") == [
        "#id\tstart\tend\tpubmed\ttitle",
        "1\t1\t180\t12345678\tA minimal record for testing readers of flat files of annotated nucleotide sequence",
        "2\t41\t60\t.\tDirect Submission",
    ]
    assert _section(lines,"feature counts") == ["#type\tcount","CDS\t1","gene\t2","misc_feature\t1","source\t1"]

    assert "## features" not in lines
    assert "## sequence" not in lines

@pytest.mark.functional
def test_features_option(tempdir):
    status, lines = _run(tempdir,"--features")
    assert status == 0
    assert _section(lines,"features") == [
        "#type\tlocation\tcompletion\tlength\tname",
        "source\t1..180\tcomplete\t180\t.",
        "gene\t1..60\tcomplete\t60\tmnaA",
        "CDS\t1..30,41..60\tcomplete\t50\tmnaA",
        "gene\t91..150\tcomplement\t60\tmnaB",
        "misc_feature\t161..180\tpartial5\t20\tpartial at 5' end",
    ]

@pytest.mark.functional
def test_sequence_option(tempdir):
    status, lines = _run(tempdir,"--sequence","--width","50")
    assert status == 0
    found = _section(lines,"sequence")
    assert [len(X) for X in found] == [50,50,50,30]
    assert "".join(found) == MINI["sequence"]

@pytest.mark.functional
def test_stdout(capsys):
    assert main([REF_FILES["mini_gb"]]) == 0
    out = capsys.readouterr().out
    assert out.startswith("## locus\nname\tMINI01\n")

@pytest.mark.functional
def test_malformed_file_exit_status(tempdir):
    infile = os.path.join(tempdir,"truncated.gb")
    with open(REF_FILES["mini_gb"],"rb") as fin, open(infile,"wb") as fout:
        fout.write(fin.read().split(b"ORIGIN")[0])

    outfile = os.path.join(tempdir,"out.txt")
    assert main([infile,outfile]) == 1
    assert not os.path.exists(outfile)

@pytest.mark.functional
def test_bad_width(tempdir):
    with pytest.raises(SystemExit):
        main(["--width","0",REF_FILES["mini_gb"]])

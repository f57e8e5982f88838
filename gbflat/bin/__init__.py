#!/usr/bin/env python
"""Command-line scripts for inspecting `GenBank`_ flat files

    =========================   =============================================================================
    **Script**                  **Purpose**
    -------------------------   -----------------------------------------------------------------------------
    |genbank_summary|           Summarize a record's locus, metadata, organism, references, and
                                feature table, optionally listing each feature and the sequence
    =========================   =============================================================================

Each script is installed as a command-line program of the same name. Run it
with ``--help`` for usage.
"""

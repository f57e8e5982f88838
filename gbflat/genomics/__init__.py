#!/usr/bin/env python
"""This package contains object types describing a parsed `GenBank`_ record.

Package overview
================

    =============================================  ==================================================================
    **Submodule**                                   **Description**
    ---------------------------------------------  ------------------------------------------------------------------
    :py:mod:`~gbflat.genomics.genome`                |Genome| and the header, citation, and feature types it holds

    :py:mod:`~gbflat.genomics.ranges`                |RangeSet|, the set of positions covered by a feature

    :py:mod:`~gbflat.genomics.sequence`              |GeneSequence|, a nucleotide sequence packed at two bits per base
    =============================================  ==================================================================
"""

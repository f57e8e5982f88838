#!/usr/bin/env python
"""Library components for writing command-line scripts

    =================================================    =========================
    **Package module**                                   **Contents**
    -------------------------------------------------    -------------------------
    :py:mod:`~gbflat.util.scriptlib.help_formatters`      Utilities to reformat module docstrings for use as command-line help text
    =================================================    =========================
"""

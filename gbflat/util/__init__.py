#!/usr/bin/env python
"""Miscellaneous, general utilities useful for scripting

Package overview
================

    ===================================   ===================================================================
    **Subpackages**                       **Contents**
    -----------------------------------   -------------------------------------------------------------------
    :py:obj:`~gbflat.util.io`              Output writers and file openers
    :py:obj:`~gbflat.util.scriptlib`       Tools for writing command-line scripts that use :data:`gbflat`
    :py:obj:`~gbflat.util.services`        Exceptions
    ===================================   ===================================================================
"""

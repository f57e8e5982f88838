#!/usr/bin/env python
"""Setup script for gbflat. Command-line scripts are discovered in
`gbflat/bin` and installed as console entry points of the same name.
"""
import os
from setuptools import setup, find_packages

gbflat_version = "0.1.0"

base_path = os.path.dirname(os.path.abspath(__file__))


#===============================================================================
# Package metadata
#===============================================================================

with open(os.path.join(base_path,"README.rst")) as f:
    long_description = f.read()

install_requires = [
    "numpy>=1.17",
    "termcolor",
]

tests_require = [
    "pytest>=6.0",
    "biopython>=1.78",
]


def get_scripts():
    """Detect command-line scripts automatically

    Returns
    -------
    list
        list of strings describing command-line scripts
    """
    binscripts = [
        X.replace(".py", "") for X in filter(
            lambda x: x.endswith(".py") and  "__init__" not in x,
            os.listdir(os.path.join(base_path,"gbflat","bin")),
        )
    ]
    return ["%s = gbflat.bin.%s:main" % (X, X) for X in binscripts]


#===============================================================================
# Main setup
#===============================================================================

setup(

    name             = "gbflat",
    version          = gbflat_version,
    long_description = long_description,
    long_description_content_type = "text/x-rst",

    description      = "Parser for GenBank flat-file records of annotated nucleotide sequence",
    license          = "BSD 3-Clause",
    keywords         = "genbank genome annotation sequence parser genomics biology",
    platforms        = "OS Independent",

    classifiers      = [
         'Development Status :: 3 - Alpha',
         'Programming Language :: Python :: 3',

         'Topic :: Scientific/Engineering :: Bio-Informatics',
         'Topic :: Software Development :: Libraries',

         'Intended Audience :: Science/Research',
         'Intended Audience :: Developers',

         'License :: OSI Approved :: BSD License',
         'Operating System :: POSIX',
         'Natural Language :: English',
    ],

    zip_safe = False,
    packages = find_packages(),
    package_data = {
        "gbflat" : ["test/data/*.gb"],
    },

    package_dir = {
        "gbflat"  : "gbflat",
    },

    entry_points = {
        "console_scripts" : get_scripts()
    },

    python_requires  = ">=3.6",
    install_requires = install_requires,
    extras_require   = {
        "test" : tests_require,
    },

) # yapf: disable

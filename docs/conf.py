"""Sphinx configuration file for indexpair documentation."""

import os
import sys

# Add the package to the Python path
sys.path.insert(0, os.path.abspath(".."))

# Project information
project = "indexpair"
copyright = "2026, indexpair contributors"
author = "indexpair contributors"

release = "0.1.0"
version = "0.1.0"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.viewcode",
    "sphinx.ext.napoleon",
    "sphinx.ext.intersphinx",
    "sphinx_autodoc_typehints",
]

exclude_patterns = ["_build"]
language = "en"

html_theme = "furo"
html_title = f"{project} {version}"

# Keep IndexPair members in source order: constructors, then forms
autodoc_member_order = "bysource"
autodoc_default_options = {
    "members": True,
    "special-members": "__str__, __repr__",
    "undoc-members": True,
}

# NumPy-style docstrings only
napoleon_google_docstring = False
napoleon_numpy_docstring = True
napoleon_use_rtype = True
napoleon_attr_annotations = True

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    "pandas": ("https://pandas.pydata.org/docs/", None),
}

autodoc_typehints = "description"
typehints_fully_qualified = False

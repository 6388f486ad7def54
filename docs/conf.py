"""Sphinx configuration."""
import varexport

project = "varexport"
author = varexport.__author__
copyright = varexport.__copyright__
release = version = varexport.__version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.doctest",
    "sphinx.ext.intersphinx",
    "sphinx.ext.napoleon",
]

autodoc_typehints = "none"
autodoc_member_order = "bysource"

intersphinx_mapping = {"python": ("https://docs.python.org/3", None)}

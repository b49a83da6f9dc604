# Configuration file for the Sphinx documentation builder.
#
# For the full list of options, see:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import os
import sys

# -- Path setup --------------------------------------------------------------

# Project root on sys.path so autodoc imports the applications
sys.path.insert(0, os.path.abspath(".."))

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "portail_famille.settings")

import django
django.setup()

# -- Project information -----------------------------------------------------

project = "Portail Famille"
author = "Équipe Portail Famille"
release = "0.1"
version = "0.1.0"

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.viewcode",
    "sphinx.ext.napoleon",     # NumPy style docstrings
]

templates_path = []
exclude_patterns = ["_build"]

language = "fr"

# -- Options for HTML output -------------------------------------------------

html_theme = "sphinx_rtd_theme"
html_static_path = []

# -- Autodoc settings --------------------------------------------------------

autodoc_member_order = "bysource"
autodoc_typehints = "description"
napoleon_google_docstring = False

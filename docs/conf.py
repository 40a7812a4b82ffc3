"""Sphinx configuration for the phacstyle docs."""

import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

project = "phacstyle"
copyright = "MIT"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.intersphinx",
    "sphinx.ext.viewcode",
    "numpydoc",
]

templates_path = ["_templates"]
exclude_patterns: list[str] = ["_build"]

autosummary_generate = True
autodoc_typehints = "description"
autodoc_member_order = "groupwise"

numpydoc_show_class_members = False
numpydoc_class_members_toctree = False

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "pandas": ("https://pandas.pydata.org/pandas-docs/stable", None),
    "plotnine": ("https://plotnine.org", None),
}

html_theme = "alabaster"
html_static_path: list[str] = []

# Docs build without the plotting stack installed.
autodoc_mock_imports = [
    "pandas",
    "plotnine",
    "palettable",
    "yaml",
]

import os
import sys
from datetime import datetime

# -- Project information -----------------------------------------------------

project = 'splinesuite'
copyright = f'{datetime.now().year}, splinesuite developers'
author = 'splinesuite developers'
release = '0.1.0'
version = '0.1'

sys.path.insert(0, os.path.abspath('../../src'))

# -- General configuration ---------------------------------------------------

extensions = [
    "autoapi.extension",
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.mathjax",
    "myst_parser",
    "sphinx_copybutton",
]

templates_path = ['_templates']
exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']

# -- Options for HTML output -------------------------------------------------

html_theme = 'sphinx_rtd_theme'

# -- AutoAPI configuration ---------------------------------------------------
autoapi_type = 'python'
autoapi_dirs = ['../../src']
autoapi_options = [
    "members",
    "undoc-members",
    "show-inheritance",
    "show-module-summary",
]
autoapi_add_toctree_entry = True

# -- napoleon configuration -------------------------------------------------
napoleon_numpy_docstring = True
napoleon_google_docstring = False

# -- myst configuration ---------------------------------------------------
myst_enable_extensions = [
    "colon_fence",
    "dollarmath",
    "amsmath",
]

source_suffix = {
    '.rst': 'restructuredtext',
    '.md': 'markdown',
}

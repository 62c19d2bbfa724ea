"""
Stylesheet Text Loader
----------------------
Resolves stylesheet inputs (files, directories, glob patterns) and returns
their CSS text. SCSS/Sass sources are compiled with libsass, which is only
imported once such a file shows up.
"""

import glob
import os

from .errors import MissingDependencyError, NoStylesheetsError, raise_walk_error

CSS_EXTENSIONS = ('.css',)
SASS_EXTENSIONS = ('.scss', '.sass')
STYLESHEET_EXTENSIONS = CSS_EXTENSIONS + SASS_EXTENSIONS

SASS_INSTALL_HINT = "'libsass' not installed. Run: pip install libsass (or pip install 'css-usage[scss]')"


def is_sass_file(path):
    return str(path).lower().endswith(SASS_EXTENSIONS)


def expand_css_paths(inputs):
    """Expand files, directories and glob patterns into stylesheet files"""
    expanded = []

    for item in inputs:
        item = str(item)
        if any(ch in item for ch in '*?['):
            expanded.extend(sorted(p for p in glob.glob(item, recursive=True) if os.path.isfile(p)))
        elif os.path.isdir(item):
            for root, dirs, files in os.walk(item, onerror=raise_walk_error):
                dirs.sort()
                for name in sorted(files):
                    # Sass partials are only meaningful through an @import
                    if name.startswith('_') and is_sass_file(name):
                        continue
                    if name.lower().endswith(STYLESHEET_EXTENSIONS):
                        expanded.append(os.path.join(root, name))
        elif os.path.isfile(item):
            expanded.append(item)

    # Keep the first occurrence when patterns overlap
    unique = list(dict.fromkeys(expanded))
    if not unique:
        raise NoStylesheetsError(f"No CSS/SCSS files matched: {' '.join(str(i) for i in inputs)}")
    return unique


def load_sass():
    """Import libsass on first use"""
    try:
        import sass
    except ImportError:
        raise MissingDependencyError(SASS_INSTALL_HINT) from None
    return sass


def compile_sass(css_path, verbose=False):
    sass = load_sass()
    css = sass.compile(filename=str(css_path), output_style='expanded')
    if verbose:
        print(f"[scss] compiled {css_path} successfully ({len(css)} chars)")
    return css


def read_css_or_scss(css_path, verbose=False):
    """CSS text of a single stylesheet, compiling SCSS/Sass when needed"""
    if is_sass_file(css_path):
        return compile_sass(css_path, verbose=verbose)

    with open(css_path, 'r', encoding='utf-8') as f:
        css = f.read()
    if verbose:
        print(f"[css] read {css_path} ({len(css)} chars)")
    return css


def load_stylesheets(css_paths, verbose=False):
    """Concatenate the CSS text of every path, in order, newline separated"""
    return '\n'.join(read_css_or_scss(path, verbose=verbose) for path in css_paths)

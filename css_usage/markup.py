"""
Markup Class Extractor
----------------------
Walks a directory of HTML and component-template files and collects the
class names they apply statically:

• class="..." / className="..." with ', " or ` quotes
• JSX brace forms: className={"..."} and className={`...`}

Backtick templates are read as plain strings. Nothing is evaluated, so
placeholders such as ${active} are dropped and classes built by helpers
(clsx, classnames, string concatenation) are not seen at all.
"""

import os
import re

from .errors import raise_walk_error

MARKUP_EXTENSIONS = ('.html', '.htm', '.vue', '.jsx', '.tsx')

# class= / className=, optional JSX braces, value in matching quotes
CLASS_ATTR_RE = re.compile(r'(?<![\w-])class(?:Name)?=\{?(["\'`])(.*?)\1', re.DOTALL)

CLASS_NAME_RE = re.compile(r'[_a-zA-Z][_a-zA-Z0-9-]*')


def list_files(directory, exts=MARKUP_EXTENSIONS):
    """Recursively list files under directory whose name ends with one of exts"""
    if not os.path.isdir(directory):
        raise NotADirectoryError(f"Markup directory not found: {directory}")

    found = []
    for root, dirs, files in os.walk(directory, onerror=raise_walk_error):
        dirs.sort()
        for name in sorted(files):
            if name.lower().endswith(exts):
                found.append(os.path.join(root, name))
    return found


def extract_classes_from_markup(content: str) -> set[str]:
    """Extract class tokens from class/className attribute values"""
    classes = set()
    for match in CLASS_ATTR_RE.finditer(content):
        for token in match.group(2).split():
            # ${expr}, ternaries, quoted literals etc. are not class names
            if CLASS_NAME_RE.fullmatch(token):
                classes.add(token)
    return classes


def collect_used_classes(html_dir, verbose=False) -> set[str]:
    """Union of the classes applied in every markup file under html_dir"""
    markup_files = list_files(html_dir)
    used = set()

    for file_path in markup_files:
        with open(file_path, 'r', encoding='utf-8', errors='ignore') as f:
            content = f.read()

        found = extract_classes_from_markup(content)
        used.update(found)
        if verbose:
            print(f"[usage] {file_path}: {len(found)} classes")

    if verbose:
        print(f"[usage] scanned {len(markup_files)} markup files, found {len(used)} unique classes")
    return used

"""
Selector Class Extractor
------------------------
Lexical scan of stylesheet text for `.class` tokens. Block comments are
stripped first; nothing else about CSS grammar is understood, so a token in
a string or a URL (url(bg.png) -> "png") counts as a declared class too.
"""

import re

COMMENT_RE = re.compile(r'/\*.*?\*/', re.DOTALL)
CLASS_SELECTOR_RE = re.compile(r'\.([_a-zA-Z][_a-zA-Z0-9-]*)')


def strip_comments(css_text):
    return COMMENT_RE.sub('', css_text)


def class_tokens(css_text):
    """Class names of every .identifier token, in order, comments removed"""
    return CLASS_SELECTOR_RE.findall(strip_comments(css_text))


def collect_css_classes(css_text) -> set[str]:
    """Declared classes of a stylesheet"""
    return set(class_tokens(css_text))


def mask_comments(css_text):
    """Blank out comments with spaces, keeping every other offset unchanged"""
    return COMMENT_RE.sub(lambda m: ' ' * len(m.group(0)), css_text)

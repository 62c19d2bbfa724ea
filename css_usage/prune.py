"""
Rule Pruner
-----------
Removes flat `selectors { declarations }` blocks whose selector list names
no used class. The scan is not brace-depth aware: inside an at-rule only the
innermost blocks are considered, and the at-rule's own braces are left as
they are. Braces inside comments never delimit a block.

Blocks without any class selector (div {}, [type=text] {}) can never be
shown to be used by this method and are always removed.
"""

import re

from .selectors import class_tokens, mask_comments

RULE_BLOCK_RE = re.compile(r'[^{}]+\{[^{}]*\}')


def block_is_used(block, used):
    """True when the selector part of block names at least one used class"""
    selector_text = block.split('{', 1)[0]
    return any(cls in used for cls in class_tokens(selector_text))


def prune_css(css_text, used) -> tuple[str, int]:
    """Return (pruned css, number of removed blocks)"""
    # Blocks are found on the masked copy; kept text comes from the original
    masked = mask_comments(css_text)
    out_parts: list[str] = []
    i = 0
    removed = 0

    for m in RULE_BLOCK_RE.finditer(masked):
        if block_is_used(m.group(0), used):
            continue
        out_parts.append(css_text[i:m.start()])
        i = m.end()
        removed += 1

    out_parts.append(css_text[i:])
    return ''.join(out_parts), removed

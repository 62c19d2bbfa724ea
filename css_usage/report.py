"""
Usage Reporter and Audit Export
-------------------------------
Compares declared and used class sets, prints the summary, and optionally
exports a per-class audit table (CSV or JSON) with the selectors that
reference each class.
"""

from dataclasses import dataclass, field

import cssutils
import pandas as pd

from .selectors import CLASS_SELECTOR_RE

# Suppress cssutils parsing warnings
cssutils.log.setLevel(40)  # ERROR level only

AUDIT_COLUMNS = ['class', 'status', 'selector_count', 'selectors']


@dataclass
class UsageReport:
    declared: set[str]
    used: set[str]
    unused: list[str] = field(default_factory=list)

    @property
    def total_count(self) -> int:
        return len(self.declared)

    @property
    def unused_count(self) -> int:
        return len(self.unused)

    @property
    def used_count(self) -> int:
        return self.total_count - self.unused_count


def compute_usage(declared, used) -> UsageReport:
    """Declared classes that no markup file applies, alphabetically"""
    unused = sorted(c for c in declared if c not in used)
    return UsageReport(declared=set(declared), used=set(used), unused=unused)


def print_report(report: UsageReport):
    print(f"\nCSS classes: {report.total_count}")
    print(f"Used: {report.used_count}")
    print(f"Unused: {report.unused_count}\n")
    if report.unused:
        print('\n'.join(f"- {c}" for c in report.unused))


def _style_rules(rules):
    """Style rules at top level and inside @media blocks"""
    for rule in rules:
        if rule.type == cssutils.css.CSSRule.STYLE_RULE:
            yield rule
        elif rule.type == cssutils.css.CSSRule.MEDIA_RULE:
            yield from _style_rules(rule.cssRules)


def collect_selectors(css_text):
    """Map class name -> selector texts that mention it"""
    stylesheet = cssutils.parseString(css_text)
    selectors = {}

    for rule in _style_rules(stylesheet):
        for selector in rule.selectorList:
            selector_text = selector.selectorText
            for class_name in CLASS_SELECTOR_RE.findall(selector_text):
                selectors.setdefault(class_name, [])
                if selector_text not in selectors[class_name]:
                    selectors[class_name].append(selector_text)
    return selectors


def build_audit_table(report: UsageReport, css_text) -> pd.DataFrame:
    selectors = collect_selectors(css_text)
    unused = set(report.unused)

    rows = []
    for class_name in report.declared:
        class_selectors = selectors.get(class_name, [])
        rows.append({
            'class': class_name,
            'status': 'unused' if class_name in unused else 'used',
            'selector_count': len(class_selectors),
            'selectors': ', '.join(class_selectors),
        })

    df = pd.DataFrame(rows, columns=AUDIT_COLUMNS)
    # 'unused' sorts before 'used'
    return df.sort_values(['status', 'class']).reset_index(drop=True)


def export_audit(report: UsageReport, css_text, output_path, verbose=False):
    """Write the audit table; JSON for a .json path, CSV otherwise"""
    df = build_audit_table(report, css_text)

    if str(output_path).lower().endswith('.json'):
        df.to_json(output_path, orient='records', indent=2)
    else:
        df.to_csv(output_path, index=False)

    if verbose:
        print(f"[report] {len(df)} classes written to {output_path}")
    return df

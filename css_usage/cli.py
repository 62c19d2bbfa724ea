"""
css-usage
---------
Report CSS classes that no markup file uses, and optionally write a copy of
the stylesheet with the unused rules removed.

Examples:
    css-usage ./playground ./playground/styles.css
    css-usage ./playground ./playground/styles.scss --remove --out pruned.css
    css-usage ./src "styles/**/*.css" --keep is-open --keep is-active --report audit.csv
"""

import argparse
import sys
import traceback
from dataclasses import dataclass, field

from .errors import CssUsageError
from .markup import collect_used_classes
from .prune import prune_css
from .report import compute_usage, export_audit, print_report
from .selectors import collect_css_classes
from .stylesheet import expand_css_paths, load_stylesheets

DEFAULT_OUT = 'pruned.css'


@dataclass
class Options:
    html_dir: str
    css_paths: list[str]
    remove: bool = False
    out: str = DEFAULT_OUT
    verbose: bool = False
    safelist: list[str] = field(default_factory=list)
    report: str | None = None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='css-usage',
        description='Find CSS classes unused by HTML/JSX/Vue markup and prune them',
        epilog='Classes built dynamically (clsx, string concatenation, variables) are not detected; use --keep for them.',
    )
    parser.add_argument('html_dir', help='Directory scanned recursively for markup files')
    parser.add_argument('css_paths', nargs='+', metavar='css_path',
                        help='CSS/SCSS file, directory or glob pattern')
    parser.add_argument('-r', '--remove', action='store_true',
                        help='Remove unused CSS rules and write the result')
    parser.add_argument('-o', '--out', default=DEFAULT_OUT,
                        help=f'Output CSS (default: {DEFAULT_OUT})')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose logs')
    parser.add_argument('-k', '--keep', action='append', metavar='CLASS',
                        help='Class name to treat as used (repeatable)')
    parser.add_argument('--report', metavar='FILE',
                        help='Export a per-class audit table (.csv or .json)')
    return parser


def parse_args(argv: list[str] | None = None) -> Options:
    args = build_parser().parse_args(argv)
    return Options(
        html_dir=args.html_dir,
        css_paths=args.css_paths,
        remove=args.remove,
        out=args.out,
        verbose=args.verbose,
        safelist=args.keep or [],
        report=args.report,
    )


def run(opts: Options):
    """Scan, report, and prune according to opts"""
    used = collect_used_classes(opts.html_dir, verbose=opts.verbose)
    if opts.safelist:
        used |= set(opts.safelist)
        if opts.verbose:
            print(f"[usage] {len(opts.safelist)} safelisted classes")

    css_files = expand_css_paths(opts.css_paths)
    css_text = load_stylesheets(css_files, verbose=opts.verbose)
    css_classes = collect_css_classes(css_text)

    report = compute_usage(css_classes, used)
    print_report(report)

    if opts.report:
        export_audit(report, css_text, opts.report, verbose=opts.verbose)

    if opts.remove:
        pruned, removed = prune_css(css_text, used)
        with open(opts.out, 'w', encoding='utf-8') as f:
            f.write(pruned)
        if opts.verbose:
            print(f"[prune] removed {removed} rule blocks")
        print(f"\nPruned CSS written to {opts.out}")

    return report


def main(argv: list[str] | None = None) -> None:
    opts = parse_args(argv)
    try:
        run(opts)
    except CssUsageError as e:
        sys.exit(f"[error] {e}")
    except Exception as e:
        print(f"[error] {e}", file=sys.stderr)
        traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    main()

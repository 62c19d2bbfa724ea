"""Find unused CSS classes in a markup tree and prune them from stylesheets."""

from .errors import CssUsageError, MissingDependencyError, NoStylesheetsError
from .markup import collect_used_classes, extract_classes_from_markup
from .prune import prune_css
from .report import UsageReport, compute_usage
from .selectors import collect_css_classes
from .stylesheet import expand_css_paths, load_stylesheets

__version__ = '0.1.0'

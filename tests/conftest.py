import os

import pytest


@pytest.fixture
def site(tmp_path):
    """A small markup tree: plain HTML plus a JSX component"""
    root = tmp_path / "site"
    (root / "components").mkdir(parents=True)
    (root / "index.html").write_text('<div class="a b">\n  <p>hi</p>\n</div>\n', encoding="utf-8")
    (root / "components" / "Card.jsx").write_text(
        'export const Card = () => <span className="b c">card</span>;\n', encoding="utf-8"
    )
    (root / "notes.txt").write_text('class="not-scanned"', encoding="utf-8")
    return root


@pytest.fixture
def unreadable_subdir(monkeypatch):
    """Make os.scandir fail for any directory named 'locked'"""
    real_scandir = os.scandir

    def scandir(path="."):
        if os.path.basename(os.fspath(path)) == "locked":
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", scandir)

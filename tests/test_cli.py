"""End-to-end tests for the css-usage command."""

import sys

import pytest

from css_usage.cli import DEFAULT_OUT, main, parse_args


@pytest.fixture
def stylesheet(tmp_path):
    path = tmp_path / "styles.css"
    path.write_text(".a{color:red}.x{color:blue}", encoding="utf-8")
    return path


class TestParseArgs:
    def test_defaults(self):
        opts = parse_args(["site", "a.css", "b.css"])
        assert opts.html_dir == "site"
        assert opts.css_paths == ["a.css", "b.css"]
        assert opts.out == DEFAULT_OUT == "pruned.css"
        assert not opts.remove
        assert not opts.verbose
        assert opts.safelist == []
        assert opts.report is None

    def test_flags(self):
        opts = parse_args(["site", "a.css", "-r", "-v", "-o", "out.css", "-k", "x", "-k", "y"])
        assert opts.remove and opts.verbose
        assert opts.out == "out.css"
        assert opts.safelist == ["x", "y"]

    def test_keep_before_positionals(self):
        opts = parse_args(["-k", "x", "site", "a.css"])
        assert opts.safelist == ["x"]
        assert opts.html_dir == "site"
        assert opts.css_paths == ["a.css"]

    def test_missing_positionals(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            parse_args(["site"])
        assert excinfo.value.code == 2
        assert "usage:" in capsys.readouterr().err


class TestMain:
    def test_report(self, site, stylesheet, capsys):
        main([str(site), str(stylesheet)])
        out = capsys.readouterr().out
        assert "CSS classes: 2" in out
        assert "Used: 1" in out
        assert "Unused: 1" in out
        assert "- x" in out

    def test_remove_writes_pruned_css(self, site, stylesheet, tmp_path, capsys):
        out_file = tmp_path / "pruned.css"
        out_file.write_text("old", encoding="utf-8")
        main([str(site), str(stylesheet), "--remove", "--out", str(out_file)])
        assert out_file.read_text(encoding="utf-8") == ".a{color:red}"
        assert f"Pruned CSS written to {out_file}" in capsys.readouterr().out

    def test_no_file_written_without_remove(self, site, stylesheet, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        main([str(site), str(stylesheet)])
        assert not (tmp_path / DEFAULT_OUT).exists()

    def test_empty_markup_directory(self, tmp_path, stylesheet, capsys):
        empty = tmp_path / "empty"
        empty.mkdir()
        main([str(empty), str(stylesheet)])
        out = capsys.readouterr().out
        assert "Used: 0" in out
        assert "- a\n- x" in out

    def test_keep(self, site, stylesheet, tmp_path):
        out_file = tmp_path / "kept.css"
        main([str(site), str(stylesheet), "-r", "-o", str(out_file), "--keep", "x"])
        assert out_file.read_text(encoding="utf-8") == ".a{color:red}.x{color:blue}"

    def test_audit_export(self, site, stylesheet, tmp_path):
        report = tmp_path / "audit.csv"
        main([str(site), str(stylesheet), "--report", str(report)])
        assert report.read_text(encoding="utf-8").startswith("class,status,selector_count,selectors")


class TestErrors:
    def test_no_stylesheet_match(self, site, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main([str(site), str(tmp_path / "missing*.css")])
        assert "No CSS/SCSS files matched" in str(excinfo.value.code)

    def test_missing_libsass(self, site, tmp_path, monkeypatch):
        scss = tmp_path / "styles.scss"
        scss.write_text(".a { color: red; }", encoding="utf-8")
        monkeypatch.setitem(sys.modules, "sass", None)
        with pytest.raises(SystemExit) as excinfo:
            main([str(site), str(scss)])
        assert "pip install libsass" in str(excinfo.value.code)

    def test_missing_markup_directory(self, tmp_path, stylesheet, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main([str(tmp_path / "nowhere"), str(stylesheet)])
        assert excinfo.value.code == 1
        err = capsys.readouterr().err
        assert "[error] Markup directory not found" in err
        assert "Traceback" in err

"""
Tests for the lint pipeline using pytest.

Tests cover:
- lint_source: end-to-end checks of a single loaded file
- lint_tree: discovery, role filtering, load failures, ordering, idempotence,
  fatal errors, progress reporting
"""

import asyncio
from pathlib import Path

import pytest

from adapters.filesystem import MockFileEnumerator
from core.exceptions import ConfigurationError, DiscoveryError, EmptyScanError
from core.linting import lint_source, lint_tree, run_lint
from core.models import LintError
from models import FileRole


# ============================================================================
# Tests for lint_source
# ============================================================================


@pytest.mark.unit
def test_lint_source_clean_component(source_file_factory):
    """A component following every convention has no violations."""
    source = source_file_factory(
        "component/navigationarea.scss",
        FileRole.COMPONENT,
        "// -- navigation area --",
        "$cNavigationArea_height: 40px;",
        "",
        "%cNavigationArea {",
        "  height: $cNavigationArea_height;",
        "}",
        "",
        "%cNavigationArea_makeItPop {",
        "  // TODO: pick a colour",
        "}",
        "",
        "@mixin cNavigationArea_hover($color) {",
        "  color: $color;",
        "}",
    )

    assert lint_source(source) == []


@pytest.mark.unit
def test_lint_source_collects_violations_in_line_order(source_file_factory):
    """Every violation is reported with its line number."""
    source = source_file_factory(
        "module/pageheader.scss",
        FileRole.MODULE,
        "// header module",
        ".pageheader {",
        "}",
        ".othername { }",
        "$mPageHeader_Bad: 1px;",
    )

    assert lint_source(source) == [
        LintError(1, "root level comments should be in the form // -- comment --"),
        LintError(4, "invalid class selector name", ".othername"),
        LintError(5, "invalid variable name", "$mPageHeader_Bad"),
    ]


@pytest.mark.unit
def test_lint_source_crlf_content(source_file_factory):
    """Carriage return terminators do not leak into line text."""
    source = source_file_factory("config.scss", FileRole.CONFIG, "$colorRed: #ff0000;\r")

    assert lint_source(source) == []


# ============================================================================
# Tests for lint_tree - filesystem
# ============================================================================


@pytest.mark.unit
def test_lint_tree_on_disk(scss_tree_factory):
    """Lints a real tree, skipping files without a role."""
    root = scss_tree_factory(
        {
            "config.scss": "$colorRed: #ff0000;\n",
            "layout.scss": "$badName: 1px;\n",
            "module/pageheader.scss": ".pageheader-navigationitem { }\n",
            "vendor/reset.scss": "* { margin: 0; }\n",
            "README.md": "# not scss\n",
        }
    )

    report = run_lint(root)

    assert report.discovered_count == 4
    assert report.linted == ["config.scss", "layout.scss", "module/pageheader.scss"]
    assert report.skipped_count == 1
    assert report.results == {
        "layout.scss": [LintError(1, "invalid variable name", "$badName")]
    }


@pytest.mark.unit
def test_lint_tree_is_idempotent(scss_tree_factory):
    """Two runs over an unchanged tree produce equal reports."""
    root = scss_tree_factory(
        {
            f"component/item{i}.scss": f"$cItem{i}_size: 1px;\n.bad {{}}\n"
            for i in range(20)
        }
    )

    first = run_lint(root)
    second = run_lint(root)

    assert first == second
    assert list(first.results) == sorted(first.results)


@pytest.mark.unit
def test_lint_tree_missing_root_raises_configuration_error(tmp_path):
    """A missing root fails before any file is processed."""
    with pytest.raises(ConfigurationError):
        run_lint(tmp_path / "missing")


@pytest.mark.unit
def test_lint_tree_empty_root_raises_empty_scan_error(scan_root):
    """A root without stylesheets is a fatal empty scan."""
    (scan_root / "notes.txt").write_text("hello", encoding="utf-8")

    with pytest.raises(EmptyScanError, match=r"\*\.scss"):
        run_lint(scan_root)


# ============================================================================
# Tests for lint_tree - mocked collaborators
# ============================================================================


@pytest.mark.unit
def test_lint_tree_load_error_is_soft(mock_file_reader_factory):
    """An unreadable file is skipped and recorded; siblings are still linted."""
    root = Path("/scss")
    enumerator = MockFileEnumerator(["style.scss", "config.scss", "layout.scss"])
    reader = mock_file_reader_factory(
        root,
        {"config.scss": "$colorRed: red;", "style.scss": "$x: 1;"},
    )

    report = asyncio.run(lint_tree(root, enumerator=enumerator, file_reader=reader))

    assert report.linted == ["config.scss", "style.scss"]
    assert list(report.load_errors) == ["layout.scss"]
    assert report.skipped_count == 1
    assert report.results == {
        "style.scss": [LintError(1, "define in Config instead", "$x")]
    }


@pytest.mark.unit
def test_lint_tree_discovery_error_propagates(mock_file_reader_factory):
    """Discovery failures abort the run with no report."""
    enumerator = MockFileEnumerator(error=DiscoveryError(path="/scss/locked"))
    reader = mock_file_reader_factory(Path("/scss"), {})

    with pytest.raises(DiscoveryError):
        asyncio.run(lint_tree(Path("/scss"), enumerator=enumerator, file_reader=reader))

    assert reader.read_file_calls == []


@pytest.mark.unit
def test_lint_tree_only_reads_lintable_files(mock_file_reader_factory):
    """Files without a role are never loaded."""
    root = Path("/scss")
    enumerator = MockFileEnumerator(["vendor/a.scss", "mixin.scss"])
    reader = mock_file_reader_factory(root, {"mixin.scss": "@mixin clearfix {"})

    report = asyncio.run(lint_tree(root, enumerator=enumerator, file_reader=reader))

    assert reader.read_file_calls == [root / "mixin.scss"]
    assert report.discovered_count == 2
    assert report.is_clean


@pytest.mark.unit
def test_lint_tree_respects_concurrency_limit():
    """No more than max_concurrent_reads files are read at once."""
    root = Path("/scss")
    paths = [f"component/c{i}.scss" for i in range(10)]
    active = 0
    peak = 0

    class SlowReader:
        async def read_file(self, file_path: Path) -> str:
            nonlocal active, peak
            active += 1
            peak = max(peak, active)
            await asyncio.sleep(0)
            active -= 1
            return ""

    report = asyncio.run(
        lint_tree(
            root,
            enumerator=MockFileEnumerator(paths),
            file_reader=SlowReader(),
            max_concurrent_reads=3,
        )
    )

    assert peak <= 3
    assert report.linted_count == 10


@pytest.mark.unit
def test_lint_tree_reports_progress(mock_file_reader_factory, tracking_progress_display):
    """Progress covers discovery and advances once per lintable file."""
    root = Path("/scss")
    enumerator = MockFileEnumerator(["config.scss", "style.scss", "other.scss"])
    reader = mock_file_reader_factory(root, {"config.scss": "", "style.scss": ""})

    asyncio.run(
        lint_tree(
            root,
            enumerator=enumerator,
            file_reader=reader,
            progress_display=tracking_progress_display,
        )
    )

    names = [call[0] for call in tracking_progress_display.calls]
    assert names == ["start", "complete", "start", "advance", "advance", "complete"]
    assert tracking_progress_display.calls[2][2] == 2

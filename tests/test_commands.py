from __future__ import annotations

from io import StringIO

import pytest
from django.core.management import CommandError, call_command

from manual.tasks import rebuild_manual_cache


def test_build_manual_writes_page(manual_sources, tmp_path) -> None:
    reference, category = manual_sources
    output = tmp_path / "manual.html"
    stdout = StringIO()

    call_command(
        "build_manual",
        reference=str(reference),
        category=str(category),
        output=str(output),
        stats=True,
        stdout=stdout,
    )

    page = output.read_text(encoding="utf-8")
    assert "Basil Language Reference" in page
    assert 'id="kw-for-each"' in page
    text = stdout.getvalue()
    assert "Keywords:           2" in text
    assert "Categories:         2" in text


def test_build_manual_missing_source(tmp_path) -> None:
    with pytest.raises(CommandError):
        call_command(
            "build_manual",
            reference=str(tmp_path / "missing.md"),
            category=str(tmp_path / "missing.md"),
            stdout=StringIO(),
            stderr=StringIO(),
        )


def test_rebuild_manual_cache(manual_settings) -> None:
    result = rebuild_manual_cache()

    assert result["success"] is True
    assert result["sections"] == 2
    assert result["categories"] == 2
    assert result["keywords"] == 2


def test_rebuild_manual_cache_reports_missing_source(settings_override) -> None:
    with settings_override(MANUAL_REFERENCE_PATH=None, MANUAL_CATEGORY_PATH=None):
        result = rebuild_manual_cache()
    assert result == {"success": False, "error": "Manual source path is not configured"}

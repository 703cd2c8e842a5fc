from __future__ import annotations

from pathlib import Path

import django
import pytest
from django.conf import settings

from .sources import CATEGORY_SOURCE, REFERENCE_SOURCE


def pytest_configure() -> None:
    if settings.configured:
        return
    settings.configure(
        DEBUG=False,
        SECRET_KEY="tests",
        ALLOWED_HOSTS=["testserver"],
        INSTALLED_APPS=["manual"],
        MIDDLEWARE=[],
        ROOT_URLCONF="manual.urls",
        DATABASES={},
        TEMPLATES=[
            {
                "BACKEND": "django.template.backends.django.DjangoTemplates",
                "APP_DIRS": True,
            }
        ],
        CACHES={"default": {"BACKEND": "django.core.cache.backends.locmem.LocMemCache"}},
        USE_TZ=True,
    )
    django.setup()


@pytest.fixture
def manual_sources(tmp_path: Path) -> tuple[Path, Path]:
    reference = tmp_path / "reference.md"
    category = tmp_path / "categories.md"
    reference.write_text(REFERENCE_SOURCE, encoding="utf-8")
    category.write_text(CATEGORY_SOURCE, encoding="utf-8")
    return reference, category


@pytest.fixture
def manual_settings(manual_sources, settings_override):
    reference, category = manual_sources
    with settings_override(
        MANUAL_REFERENCE_PATH=str(reference),
        MANUAL_CATEGORY_PATH=str(category),
    ):
        yield reference, category


@pytest.fixture
def settings_override():
    from django.core.cache import cache
    from django.test import override_settings

    cache.clear()
    yield override_settings
    cache.clear()

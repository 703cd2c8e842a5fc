from __future__ import annotations

import json

from django.template import Context, Template
from django.test import Client


def test_manual_page(manual_settings) -> None:
    response = Client().get("/")

    assert response.status_code == 200
    body = response.content.decode()
    assert 'id="kw-print"' in body
    assert 'id="cat-loops"' in body
    assert '<a href="#kw-for-each">FOR EACH</a>' in body
    assert 'id="manual-search-index"' in body
    assert '<input id="search"' not in body


def test_manual_page_missing_source(manual_sources, settings_override) -> None:
    with settings_override(MANUAL_REFERENCE_PATH="/nonexistent/reference.md"):
        response = Client().get("/")
    assert response.status_code == 404


def test_search_returns_visible_items(manual_settings) -> None:
    response = Client().get("/search/", {"q": "print"})

    assert response.status_code == 200
    payload = json.loads(response.content)
    assert payload["query"] == "print"
    assert [item["id"] for item in payload["items"]] == ["kw-print", "kw-print"]
    assert payload["items"][0]["title_html"] == "<mark>PRINT</mark>"
    categories = {c["id"]: c for c in payload["categories"]}
    assert categories["cat-inputoutput"] == {"id": "cat-inputoutput", "hidden": False, "open": True}
    assert categories["cat-loops"]["hidden"] is True


def test_search_without_query_returns_everything(manual_settings) -> None:
    payload = json.loads(Client().get("/search/").content)
    assert len(payload["items"]) == 6
    assert all(not c["hidden"] for c in payload["categories"])


def test_search_rejects_post(manual_settings) -> None:
    assert Client().post("/search/").status_code == 405


def test_template_filters() -> None:
    template = Template(
        "{% load manual_tags %}{{ source|manual_markup }}|{{ title|highlight_query:q }}"
    )
    rendered = template.render(Context({"source": "## PRINT", "title": "PRINT <x>", "q": "print"}))

    assert '<h2 id="kw-print">' in rendered
    assert rendered.endswith("|<mark>PRINT</mark> &lt;x&gt;")

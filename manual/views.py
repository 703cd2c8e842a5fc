from dataclasses import asdict

from django.http import Http404, JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_http_methods
from django.views.generic import TemplateView

from .compiler.config import get_manual_config
from .compiler.renderer import search_items
from .loader import ManualSourceError, get_manual
from .search import apply_filter


def build_manual_context(manual):
    """
    Template context shared by the manual page and the offline build.

    Contains the rendered reference and category markup, the sidebar
    entries and a search index the page script filters against.
    """
    return {
        "title": get_manual_config()["title"],
        "reference_html": manual.reference_html,
        "category_html": manual.category_html,
        "keyword_sections": manual.keyword_sections,
        "categories": manual.categories,
        "search_index": [item.to_dict() for item in search_items(manual)],
        "generated_at": timezone.now(),
    }


class ManualView(TemplateView):
    """
    The whole reference manual on one page.

    Displays:
    - Overview section
    - Alphabetical reference (one entry per keyword)
    - By-category reference
    """

    template_name = "manual/reference.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        try:
            manual = get_manual()
        except ManualSourceError as e:
            raise Http404(str(e)) from e
        context.update(build_manual_context(manual))
        return context


@require_http_methods(["GET"])
def search_view(request):
    """
    Filter the manual's section index.

    GET /search/?q=<query>

    Response (200):
    {
        "query": "print",
        "items": [{"id": "kw-print", "title_html": "...", "description_html": "..."}],
        "categories": [{"id": "cat-io", "hidden": false, "open": true}]
    }
    """
    query = request.GET.get("q", "")
    try:
        manual = get_manual()
    except ManualSourceError as e:
        raise Http404(str(e)) from e

    result = apply_filter(search_items(manual), manual.categories, query)
    return JsonResponse(
        {
            "query": result.query,
            "items": [
                {
                    "id": item.id,
                    "title_html": item.title_html,
                    "description_html": item.description_html,
                }
                for item in result.items
                if item.visible
            ],
            "categories": [asdict(state) for state in result.categories],
        }
    )

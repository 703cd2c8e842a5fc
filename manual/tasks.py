"""
Celery tasks for the reference manual.

Run a worker with: celery -A ManualSite worker -l info
"""

from celery import shared_task

from .loader import ManualSourceError, get_manual


@shared_task
def rebuild_manual_cache():
    """
    Re-render the manual from its sources and replace the cached copy.

    Returns:
        Dict with rebuild results
    """
    try:
        manual = get_manual(refresh=True)
    except ManualSourceError as e:
        return {"success": False, "error": str(e)}

    return {
        "success": True,
        "headings": len(manual.reference.headings) + len(manual.category.headings),
        "sections": len(manual.reference.sections),
        "categories": len(manual.categories),
        "keywords": len(manual.keywords),
    }

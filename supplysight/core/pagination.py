"""Page slicing for lists that are fetched whole and paginated afterwards"""
from django.conf import settings
from django.core.paginator import Paginator


def clamp_page(page, num_pages):
    """Coerce a requested page number into [1, num_pages]"""
    try:
        page = int(page)
    except (TypeError, ValueError):
        page = 1
    return min(max(page, 1), max(num_pages, 1))


def paginate(items, page=1, page_size=None):
    """
    Slice items into one page.

    Out-of-range or non-numeric page numbers are clamped rather than
    rejected, so the last page is served for a page past the end.

    Returns:
        dict with 'page', 'total_pages', 'count' and 'results'
    """
    page_size = page_size or settings.SUPPLYSIGHT_PAGE_SIZE
    paginator = Paginator(list(items), page_size)
    number = clamp_page(page, paginator.num_pages)
    page_obj = paginator.page(number)
    return {
        'page': page_obj.number,
        'total_pages': paginator.num_pages,
        'count': paginator.count,
        'results': list(page_obj.object_list),
    }

"""
Common utility functions for API responses
"""
from rest_framework.response import Response
from rest_framework import status


def success_response(data=None, message="Success", status_code=status.HTTP_200_OK):
    """
    Standard success response envelope
    """
    response_data = {
        "code": status_code,
        "msg": message,
        "data": data
    }
    return Response(response_data, status=status_code)


def error_response(message="Error", errors=None, status_code=status.HTTP_400_BAD_REQUEST):
    """
    Standard error response envelope. ``errors`` carries field errors or a
    list of violation messages.
    """
    response_data = {
        "code": status_code,
        "msg": message
    }
    if errors:
        response_data["errors"] = errors
    return Response(response_data, status=status_code)


def page_params(request, default_size=20, max_size=100):
    """Read ``page``/``pageSize`` query params, clamped to sane bounds"""
    try:
        page = max(int(request.GET.get('page', 1)), 1)
    except (TypeError, ValueError):
        page = 1
    try:
        page_size = int(request.GET.get('pageSize', default_size))
    except (TypeError, ValueError):
        page_size = default_size
    page_size = min(max(page_size, 1), max_size)
    return page, page_size


def page_info(page, page_size, total):
    """Pagination block returned next to list payloads"""
    return {
        "pageNum": page,
        "pageSize": page_size,
        "total": total,
        "totalPages": (total + page_size - 1) // page_size
    }

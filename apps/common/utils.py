"""
Common utility functions for API responses
"""
from rest_framework.response import Response
from rest_framework import status


def success_response(data=None, message="Success", status_code=status.HTTP_200_OK):
    """
    Standard success response envelope consumed by the web front end
    """
    response_data = {
        "code": status_code,
        "msg": message,
        "data": data
    }
    return Response(response_data, status=status_code)


def error_response(message="Error", errors=None, status_code=status.HTTP_400_BAD_REQUEST, error_code=None):
    """
    Standard error response envelope consumed by the web front end
    """
    response_data = {
        "code": status_code,
        "msg": message
    }
    if error_code:
        response_data["error"] = error_code
    if errors:
        response_data["errors"] = errors
    return Response(response_data, status=status_code)


def paginated_response(queryset, serializer_class, request, message="Success"):
    """
    Standard paginated response format
    """
    from rest_framework.pagination import PageNumberPagination

    paginator = PageNumberPagination()
    paginator.page_size_query_param = 'limit'
    paginator.max_page_size = 100
    page = paginator.paginate_queryset(queryset, request)

    if page is not None:
        serializer = serializer_class(page, many=True)
        return success_response({
            "count": paginator.page.paginator.count,
            "results": serializer.data,
            "page": {
                "pageNum": paginator.page.number,
                "pageSize": paginator.get_page_size(request),
                "totalPages": paginator.page.paginator.num_pages
            }
        }, message)

    serializer = serializer_class(queryset, many=True)
    return success_response({
        "count": len(serializer.data),
        "results": serializer.data,
        "page": {
            "pageNum": 1,
            "pageSize": len(serializer.data),
            "totalPages": 1
        }
    }, message)

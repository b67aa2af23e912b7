"""
Custom pagination classes for the application.
"""
import math

from django.conf import settings
from rest_framework.pagination import BasePagination
from rest_framework.response import Response

from .utils import positive_int_or_default


class ResourcePagination(BasePagination):
    """
    Page/perpage pagination.

    Missing or malformed ``page`` and ``perpage`` values fall back to the
    defaults instead of raising, and a page past the end yields an empty list.
    """
    page_query_param = 'page'
    page_size_query_param = 'perpage'

    def get_page_size(self, request):
        page_size = positive_int_or_default(
            request.query_params.get(self.page_size_query_param),
            settings.RESOURCE_PAGE_SIZE
        )
        max_page_size = getattr(settings, 'RESOURCE_MAX_PER_PAGE', None)
        if max_page_size:
            page_size = min(page_size, max_page_size)
        return page_size

    def paginate_queryset(self, queryset, request, view=None):
        self.page_number = positive_int_or_default(
            request.query_params.get(self.page_query_param), 1
        )
        self.page_size = self.get_page_size(request)
        self.total = queryset.count()

        offset = (self.page_number - 1) * self.page_size
        if offset >= self.total:
            self.results = []
        else:
            # Slice bounds must fit the database integer type.
            limit = min(self.page_size, self.total)
            self.results = list(queryset[offset:offset + limit])
        self.offset = offset
        return self.results

    def get_paginated_response(self, data):
        first = self.offset + 1 if self.results else None
        last = self.offset + len(self.results) if self.results else None
        return Response({
            'status': True,
            'message': 'Success!',
            'data': {
                'current_page': self.page_number,
                'data': data,
                'per_page': self.page_size,
                'total': self.total,
                'last_page': max(1, math.ceil(self.total / self.page_size)),
                'from': first,
                'to': last,
            }
        })

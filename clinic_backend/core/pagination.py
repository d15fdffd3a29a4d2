from django.core.paginator import Page
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response
from rest_framework.utils.urls import replace_query_param


class DataEnvelopePagination(PageNumberPagination):
    """Page-number pagination rendering {"data": [...], "links": {...}, "meta": {...}}.

    Never raises NotFound: a page past the end is an empty page, and a
    missing, non-numeric or non-positive page number means page 1.
    """

    page_size_query_param = 'per_page'
    max_page_size = 100

    def get_page_number(self, request, paginator=None):
        try:
            number = int(request.query_params.get(self.page_query_param, 1))
        except (TypeError, ValueError):
            return 1
        return max(number, 1)

    def paginate_queryset(self, queryset, request, view=None):
        self.request = request
        page_size = self.get_page_size(request)
        if not page_size:
            return None

        paginator = self.django_paginator_class(queryset, page_size)
        number = self.get_page_number(request, paginator)
        if number > paginator.num_pages:
            self.page = Page([], number, paginator)
        else:
            self.page = paginator.page(number)
        return list(self.page)

    def get_next_link(self):
        if self.page.number >= self.page.paginator.num_pages:
            return None
        return self._page_link(self.page.number + 1)

    def get_previous_link(self):
        if self.page.number <= 1:
            return None
        return self._page_link(self.page.number - 1)

    def get_paginated_response(self, data):
        paginator = self.page.paginator
        return Response(
            {
                'data': data,
                'links': {
                    'first': self._page_link(1),
                    'last': self._page_link(paginator.num_pages),
                    'prev': self.get_previous_link(),
                    'next': self.get_next_link(),
                },
                'meta': {
                    'current_page': self.page.number,
                    'last_page': paginator.num_pages,
                    'per_page': paginator.per_page,
                    'total': paginator.count,
                },
            }
        )

    def _page_link(self, number):
        return replace_query_param(
            self.request.build_absolute_uri(),
            self.page_query_param,
            number,
        )

    def get_paginated_response_schema(self, schema):
        return {
            'type': 'object',
            'required': ['data', 'links', 'meta'],
            'properties': {
                'data': schema,
                'links': {'type': 'object'},
                'meta': {'type': 'object'},
            },
        }

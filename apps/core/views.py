"""
Core views and viewsets for the application.
"""
import logging

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.filters import OrderingFilter

from .exceptions import ResourceNotFoundError, ResourceOperationError
from .mixins import MultiSerializerMixin, StandardResponseMixin
from .pagination import ResourcePagination
from .permissions import IsAuthenticatedAndActive
from .utils import request_payload

logger = logging.getLogger(__name__)


class ResourceViewSet(MultiSerializerMixin, StandardResponseMixin, viewsets.GenericViewSet):
    """
    Generic list/create/show/edit/update/destroy endpoint.

    A resource is described by data on the subclass:

        queryset            read queryset, with the joins the projections need
        serializer_class    projection used by show/edit
        serializer_classes  per-action serializers ('list', 'create', 'update', ...)
        resource_label      name used in response messages, e.g. 'Product'
        id_key              key of the id in write responses, e.g. 'product_id'
        messages            message templates, formatted with ``label``
    """
    pagination_class = ResourcePagination
    permission_classes = [IsAuthenticatedAndActive]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    ordering_fields = ['id', 'created_at', 'updated_at']
    lookup_value_regex = r'\d+'

    resource_label = None
    id_key = 'id'
    messages = {
        'created': '{label} added success!',
        'retrieved': 'Success!',
        'edit': '{label} update info!',
        'unchanged': 'There are no changes!',
        'updated': '{label} info updated success!',
        'deleted': '{label} deleted success!',
        'delete_failed': '{label} delete error!',
    }

    def get_serializer_class(self):
        if self.action == 'partial_update':
            return self.serializer_classes.get('update', self.serializer_class)
        return super().get_serializer_class()

    def get_message(self, key):
        return self.messages[key].format(label=self.resource_label)

    def get_object_or_none(self):
        return self.get_queryset().filter(pk=self.kwargs[self.lookup_field]).first()

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        page = self.paginate_queryset(queryset)
        serializer = self.get_serializer(page, many=True)
        return self.get_paginated_response(serializer.data)

    def create(self, request, *args, **kwargs):
        # An empty string counts as "not given" for nullable fields.
        payload = {
            key: None if value == '' else value
            for key, value in request_payload(request).items()
        }
        serializer = self.get_serializer(data=payload)
        serializer.is_valid(raise_exception=True)
        instance = self.perform_create(serializer)

        logger.info(f'{self.resource_label} {instance.pk} created by client {request.user.pk}')
        return self.success_response(
            {self.id_key: instance.pk},
            self.get_message('created')
        )

    def perform_create(self, serializer):
        return serializer.save()

    def retrieve(self, request, *args, **kwargs):
        """Show a record; a missing record yields ``data: null``."""
        return self._read_response('retrieved')

    @action(detail=True, methods=['get'])
    def edit(self, request, *args, **kwargs):
        """Same read as show, for edit forms."""
        return self._read_response('edit')

    def _read_response(self, message_key):
        instance = self.get_object_or_none()
        data = self.get_serializer(instance).data if instance is not None else None
        return self.success_response(data, self.get_message(message_key))

    def update(self, request, *args, **kwargs):
        """
        Apply the fields present in the payload.

        Null and blank values mean "leave as is"; zero and false are real
        values. Nothing is written when no field differs from the stored row.
        """
        instance = self.get_object_or_none()
        if instance is None:
            raise ValidationError({'id': ['The selected id is invalid.']})

        payload = {
            key: value
            for key, value in request_payload(request).items()
            if value is not None and value != ''
        }
        serializer = self.get_serializer(instance, data=payload, partial=True)
        serializer.is_valid(raise_exception=True)

        if not serializer.has_changes():
            return self.success_response(
                {self.id_key: instance.pk},
                self.get_message('unchanged')
            )

        serializer.save()
        logger.info(f'{self.resource_label} {instance.pk} updated by client {request.user.pk}')
        return self.success_response(
            {self.id_key: instance.pk},
            self.get_message('updated')
        )

    def partial_update(self, request, *args, **kwargs):
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        pk = int(self.kwargs[self.lookup_field])
        queryset = self.get_queryset().filter(pk=pk)

        if not queryset.exists():
            raise ResourceNotFoundError(self.resource_label)

        deleted, _ = queryset.delete()
        if not deleted:
            raise ResourceOperationError(self.get_message('delete_failed'))

        logger.info(f'{self.resource_label} {pk} deleted by client {request.user.pk}')
        return self.success_response({self.id_key: pk}, self.get_message('deleted'))

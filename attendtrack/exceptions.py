import functools
import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class InvalidRequest(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid request'
    default_code = 'invalid_request'


class Forbidden(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'You are not allowed to perform this action'
    default_code = 'forbidden'


class Conflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Employee already has an active check-in'
    default_code = 'conflict'


class NotFound(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'No active check-in found'
    default_code = 'not_found'


class Internal(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Something went wrong, please try again later'
    default_code = 'internal'


def _first_message(detail):
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return ''
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ''
    return str(detail)


def api_exception_handler(exc, context):
    """Render every API error as {success: false, message}."""
    view_name = context.get('view').__class__.__name__
    response = exception_handler(exc, context)
    if response is None:
        logger.exception('Unhandled error in %s', view_name)
        return Response(
            {'success': False, 'message': Internal.default_detail},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if response.status_code >= 500:
        logger.error('API error in %s: %s', view_name, exc)
    response.data = {
        'success': False,
        'message': _first_message(response.data),
    }
    return response


def persistence_guard(func):
    """Surface storage failures as a generic Internal error after logging them."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except DatabaseError:
            logger.exception('Storage failure in %s', func.__name__)
            raise Internal()
    return wrapper

from django.utils.dateparse import parse_date
from rest_framework import status as http_status
from rest_framework.response import Response

from attendtrack.exceptions import InvalidRequest


def renderResponse(message=None, status=http_status.HTTP_200_OK, **fields):
    body = {'success': True}
    if message is not None:
        body['message'] = message
    body.update(fields)
    return Response(body, status=status)


def parseQueryDate(request, name, required=False):
    """Read a YYYY-MM-DD query parameter, None when absent."""
    raw = request.query_params.get(name)
    if not raw:
        if required:
            raise InvalidRequest(f'{name} is required (YYYY-MM-DD)')
        return None
    try:
        value = parse_date(raw)
    except ValueError:
        value = None
    if value is None:
        raise InvalidRequest(f'{name} must be a valid date (YYYY-MM-DD)')
    return value

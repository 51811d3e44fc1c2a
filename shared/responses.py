from rest_framework import status as http_status
from rest_framework.response import Response


def success_response(data=None, count=None, status=http_status.HTTP_200_OK, **extra):
    """Wrap a payload in the ``{success, count?, data}`` envelope."""
    payload = {'success': True}
    if count is not None:
        payload['count'] = count
    payload['data'] = {} if data is None else data
    payload.update(extra)
    return Response(payload, status=status)

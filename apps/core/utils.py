"""
Utility functions for the application.
"""
import re

PHONE_NOISE_PATTERN = re.compile(r'[+\s\-()]')


def normalize_phone(phone):
    """
    Strip formatting from a phone number: "+998 (91) 222-33-44" -> "998912223344".
    Non-string values are returned unchanged.
    """
    if not isinstance(phone, str):
        return phone
    return PHONE_NOISE_PATTERN.sub('', phone)


def mask_phone(phone):
    """
    Mask phone number: 9989****44
    """
    if not phone or len(phone) < 6:
        return phone
    return f'{phone[:4]}****{phone[-2:]}'


def positive_int_or_default(value, default):
    """
    Parse a query-string integer, falling back to ``default`` when the value
    is missing, non-numeric, or lower than 1.
    """
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number >= 1 else default


def request_payload(request):
    """
    Merge query-string parameters with the request body, body winning.
    Clients are allowed to send resource fields either way.
    """
    payload = request.query_params.dict()
    data = request.data
    if hasattr(data, 'dict'):
        data = data.dict()
    if isinstance(data, dict):
        payload.update(data)
    return payload

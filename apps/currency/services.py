"""
Currency services.
"""
import logging

import requests
from django.conf import settings

from apps.core.exceptions import UpstreamServiceError

logger = logging.getLogger(__name__)


class CurrencyService:
    """Client for the third-party currency list."""

    @staticmethod
    def fetch_currencies():
        """Return the upstream currency list as decoded JSON."""
        try:
            response = requests.get(
                settings.CURRENCY_API_URL,
                params=settings.CURRENCY_API_PARAMS,
                timeout=settings.CURRENCY_API_TIMEOUT
            )
            response.raise_for_status()
            return response.json()
        except requests.exceptions.Timeout:
            logger.warning(f'Currency API timed out after {settings.CURRENCY_API_TIMEOUT}s')
            raise UpstreamServiceError('Currency service unavailable!')
        except requests.exceptions.RequestException as e:
            # Covers connection errors, non-2xx answers and undecodable bodies.
            logger.warning(f'Currency API request failed: {str(e)}')
            raise UpstreamServiceError('Currency service unavailable!')

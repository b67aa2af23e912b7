"""
Custom throttling classes for API rate limiting.
"""
from rest_framework.throttling import SimpleRateThrottle


class LoginThrottle(SimpleRateThrottle):
    """
    Login throttle keyed by client IP.
    The rate comes from DEFAULT_THROTTLE_RATES['login']; no rate means no limit.
    """
    scope = 'login'

    def get_rate(self):
        return self.THROTTLE_RATES.get(self.scope)

    def get_cache_key(self, request, view):
        return self.cache_format % {
            'scope': self.scope,
            'ident': self.get_ident(request)
        }

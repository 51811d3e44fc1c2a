"""Request throttles for order writes and credential checks."""

from rest_framework.throttling import SimpleRateThrottle


class AuthenticatedBurstThrottle(SimpleRateThrottle):
    """Per-account limit on placing, progressing and reviewing orders.

    Anonymous requests are left to the authentication layer, and reads are
    never counted.
    """

    scope = "auth_burst"

    def get_cache_key(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return None
        if request.method in ("GET", "HEAD", "OPTIONS"):
            return None
        return self.cache_format % {"scope": self.scope, "ident": request.user.pk}


class LoginThrottle(SimpleRateThrottle):
    """Per-client limit on credential checks."""

    scope = "login"

    def get_cache_key(self, request, view):
        return self.cache_format % {"scope": self.scope, "ident": self.get_ident(request)}

"""
Request throttling driven by the RATE_LIMIT setting.
"""

from rest_framework.throttling import SimpleRateThrottle

from django.conf import settings


class WindowRateThrottle(SimpleRateThrottle):
    """
    Fixed window throttle keyed on the user id, or the client IP for
    anonymous requests.

    DRF rate strings only allow a single time unit, so the window length
    and request count are read directly from ``settings.RATE_LIMIT``.
    """

    scope = "window"

    def get_rate(self):
        rate_limit = settings.RATE_LIMIT
        return f"{rate_limit['MAX_REQUESTS']}/{rate_limit['WINDOW_MINUTES']}m"

    def parse_rate(self, rate):
        if rate is None:
            return (None, None)
        num, period = rate.split("/")
        return int(num), int(period.rstrip("m")) * 60

    def get_cache_key(self, request, view):
        if request.user and request.user.is_authenticated:
            ident = request.user.pk
        else:
            ident = self.get_ident(request)

        return self.cache_format % {"scope": self.scope, "ident": ident}

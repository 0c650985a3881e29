# order_fulfillment/core/clock.py

from datetime import date, datetime

from order_fulfillment.core.config import APP_TZ


def get_today() -> date:
    """Current calendar date in the configured timezone.

    Routers depend on this instead of calling ``date.today()`` so tests can
    pin the date through ``app.dependency_overrides``.
    """
    return datetime.now(APP_TZ).date()

# order_fulfillment/core/config.py

import os
import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()

# =====================================================
# APPLICATION
# =====================================================
APP_ENV = os.getenv("APP_ENV", "development")
if APP_ENV not in {"development", "staging", "production"}:
    raise ValueError("APP_ENV must be development | staging | production")

IS_PRODUCTION = APP_ENV == "production"

APP_NAME = "Order Fulfillment API"
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
CORS_ORIGINS = [
    o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()
]

# =====================================================
# CLOCK
# =====================================================
APP_TIMEZONE = os.getenv("APP_TIMEZONE", "UTC")
try:
    APP_TZ = ZoneInfo(APP_TIMEZONE)
except ZoneInfoNotFoundError as exc:
    raise ValueError(f"APP_TIMEZONE '{APP_TIMEZONE}' is not a known timezone") from exc

# =====================================================
# SHIPMENTS
# =====================================================
SHIPMENT_MAX_QUANTITY = int(os.getenv("SHIPMENT_MAX_QUANTITY", 10000))
SHIPMENT_MAX_PACKAGES = int(os.getenv("SHIPMENT_MAX_PACKAGES", 1000))
if SHIPMENT_MAX_QUANTITY < 1 or SHIPMENT_MAX_PACKAGES < 1:
    raise ValueError("SHIPMENT_MAX_QUANTITY and SHIPMENT_MAX_PACKAGES must be >= 1")

# =====================================================
# DEADLINES
# =====================================================
# ---- Exclusive status thresholds (days from today) ----
DUE_SOON_DAYS = int(os.getenv("DUE_SOON_DAYS", 7))
DUE_MONTH_DAYS = int(os.getenv("DUE_MONTH_DAYS", 30))
if not 0 <= DUE_SOON_DAYS <= DUE_MONTH_DAYS:
    raise ValueError("DUE_SOON_DAYS must be between 0 and DUE_MONTH_DAYS")

if IS_PRODUCTION and not CORS_ORIGINS:
    logger.warning("Running in production without CORS_ORIGINS; browser clients will be rejected")

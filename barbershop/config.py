import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./barbershop.db")
DB_CONNECT_TIMEOUT = int(os.getenv("DB_CONNECT_TIMEOUT", "10"))

# Single-location shop
SHOP_ID = int(os.getenv("SHOP_ID", "1"))
SHOP_TIMEZONE = os.getenv("SHOP_TIMEZONE", "Asia/Kolkata")
SHOP_NAME = os.getenv("SHOP_NAME", "Vogue Studio")
SHOP_ADDRESS = os.getenv("SHOP_ADDRESS", "102 Silver Heights")
SHOP_MAP_URL = os.getenv("SHOP_MAP_URL", "https://maps.google.com/?q=102+Silver+Heights+Ahmedabad")
ARRIVAL_NOTICE_MINUTES = int(os.getenv("ARRIVAL_NOTICE_MINUTES", "15"))

# Owner notifications
OWNER_PHONE_NUMBER = os.getenv("OWNER_PHONE_NUMBER")
ADMIN_PANEL_URL = os.getenv("ADMIN_PANEL_URL", "https://barber-admin-navy.vercel.app")

# Walk-ins are entered at the front desk and usually have no contactable number
WALKIN_PHONE_PLACEHOLDER = os.getenv("WALKIN_PHONE_PLACEHOLDER", "0000000000")

# Meta WhatsApp Cloud API
META_PHONE_ID = os.getenv("META_PHONE_ID")
META_TOKEN = os.getenv("META_TOKEN")
META_API_VERSION = os.getenv("META_API_VERSION", "v17.0")
NOTIFICATION_TIMEOUT = float(os.getenv("NOTIFICATION_TIMEOUT", "10"))

# Admin credentials - unset credentials reject every login
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")
ADMIN_TOKEN_MAX_AGE = int(os.getenv("ADMIN_TOKEN_MAX_AGE", "43200"))  # 12 hours

# Security - CRITICAL: No default secret key in production
SECRET_KEY = os.getenv("SECRET_KEY")
if not SECRET_KEY:
    import warnings

    warnings.warn(
        "SECRET_KEY not set! Using insecure default - DO NOT USE IN PRODUCTION", RuntimeWarning, stacklevel=2
    )
    SECRET_KEY = "INSECURE-DEV-KEY-CHANGE-IN-PRODUCTION"  # noqa: S105 - Dev fallback only

# Status workflow: permissive unless explicitly enabled
ENFORCE_STATUS_TRANSITIONS = os.getenv("ENFORCE_STATUS_TRANSITIONS", "false").lower() == "true"

# Front-end origins (customer site + admin panel)
ALLOWED_ORIGINS = os.getenv(
    "ALLOWED_ORIGINS",
    "http://localhost:5173,https://vogue-studio-topaz.vercel.app,https://barber-admin-navy.vercel.app",
).split(",")

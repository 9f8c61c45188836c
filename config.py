import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./billing.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    API_RELOAD = bool(data.get("API_RELOAD", False))
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ENABLE_SENTRY = data.get("ENABLE_SENTRY", 0)
    DSN_SENTRY = data.get("DSN_SENTRY", "")
    SENTRY_ENVIRONMENT = data.get("SENTRY_ENVIRONMENT", "dev")
    CREATE_TABLES_ON_STARTUP = bool(data.get("CREATE_TABLES_ON_STARTUP", True))

    # Printed invoice header
    SHOP_NAME = data.get("SHOP_NAME", "Krishi Seva Kendra")
    SHOP_ADDRESS = data.get("SHOP_ADDRESS", "Main Market Road")
    SHOP_PHONE = data.get("SHOP_PHONE", "")
    SHOP_GSTIN = data.get("SHOP_GSTIN", "")
    CURRENCY_LABEL = data.get("CURRENCY_LABEL", "Rs.")  # Base-14 PDF fonts have no rupee glyph

    # Bill history pagination
    DEFAULT_PAGE_LIMIT = data.get("DEFAULT_PAGE_LIMIT", 20)
    MAX_PAGE_LIMIT = data.get("MAX_PAGE_LIMIT", 100)

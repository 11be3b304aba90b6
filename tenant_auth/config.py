import os
import yaml

ROOT_PATH = os.path.dirname(os.path.dirname(__file__))
CONFIG_FILE_PATH = os.environ.get(
    "TENANT_AUTH_CONFIG", os.path.join(ROOT_PATH, "env.yaml")
)

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./tenant_auth.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    SEED_DEFAULT_TENANTS = bool(data.get("SEED_DEFAULT_TENANTS", 1))

    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_REFRESH_SECRET = data.get(
        "JWT_REFRESH_SECRET", "dev-refresh-secret-key-change-in-production"
    )
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    ACCESS_TOKEN_TTL_MINUTES = int(data.get("ACCESS_TOKEN_TTL_MINUTES", 15))
    REFRESH_TOKEN_TTL_DAYS = int(data.get("REFRESH_TOKEN_TTL_DAYS", 7))
    MFA_TOKEN_TTL_MINUTES = int(data.get("MFA_TOKEN_TTL_MINUTES", 5))
    MFA_REQUIRE_PENDING_TOKEN = bool(data.get("MFA_REQUIRE_PENDING_TOKEN", 0))

    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    LOGIN_MAX_FAILED_ATTEMPTS = int(data.get("LOGIN_MAX_FAILED_ATTEMPTS", 5))
    LOGIN_LOCKOUT_WINDOW_MINUTES = int(data.get("LOGIN_LOCKOUT_WINDOW_MINUTES", 15))

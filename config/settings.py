from pathlib import Path
import environ
import os

BASE_DIR = Path(__file__).resolve().parent.parent

env = environ.Env(
    DJANGO_DEBUG=(bool, False),
)
environ.Env.read_env(os.path.join(BASE_DIR, ".env"))

SECRET_KEY = env("DJANGO_SECRET_KEY", default="unsafe-dev-key")
DEBUG = env("DJANGO_DEBUG")
ALLOWED_HOSTS = env.list("DJANGO_ALLOWED_HOSTS", default=["localhost", "127.0.0.1"])

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",

    "corsheaders",
    "rest_framework",

    # ahead of staticfiles so its runserver wins
    "meetings",
    "django.contrib.staticfiles",
]

MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.gzip.GZipMiddleware",
    "django.middleware.common.CommonMiddleware",
    "meetings.middleware.RequestLogMiddleware",
]

CORS_ALLOW_ALL_ORIGINS = env.bool("CORS_ALLOW_ALL_ORIGINS", default=True)

ROOT_URLCONF = "config.urls"
APPEND_SLASH = False

WSGI_APPLICATION = "config.wsgi.application"
ASGI_APPLICATION = "config.asgi.application"

# ---- Database ----
# Meetings live in the meeting store, nothing is persisted.
DATABASES = {}

# ---- Static ----
STATIC_URL = "static/"
STATICFILES_DIRS = [BASE_DIR / "public"]

# ---- DRF ----
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "UNAUTHENTICATED_USER": None,
}

# ---- Logging ----
LOG_LEVEL = env("LOG_LEVEL", default="INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "plain"},
    },
    "root": {"handlers": ["console"], "level": LOG_LEVEL},
    "loggers": {
        "botocore": {"level": "WARNING"},
    },
}

# ---- Server ----
PORT = env("PORT", default="3330")

# ---- Index page ----
MEETING_APP = env("MEETING_APP", default="meetingV2")
MEETING_INDEX_DIR = env("MEETING_INDEX_DIR", default=str(BASE_DIR / "dist"))

# ---- Meeting hosting service ----
MEETING_SERVICE_BACKEND = env("MEETING_SERVICE_BACKEND", default="chime")
CHIME_CONTROL_REGION = env("CHIME_CONTROL_REGION", default="us-east-1")
CHIME_ENDPOINT = env("CHIME_ENDPOINT", default="")

# ---- Meeting store ----
MEETING_STORE_BACKEND = env("MEETING_STORE_BACKEND", default="memory")
REDIS_URL = env("REDIS_URL", default="redis://localhost:6379/0")
MEETING_STORE_KEY = env("MEETING_STORE_KEY", default="meetings:table")
MEETING_LOCK_CREATES = env.bool("MEETING_LOCK_CREATES", default=False)

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(override=True)

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("SECRET_KEY", "django-insecure-line-translator-dev-key")
DEBUG = os.getenv("DEBUG", "True").lower() in ("1", "true", "yes")
ALLOWED_HOSTS = os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1,0.0.0.0").split(",")

INSTALLED_APPS = [
    "rest_framework",
    "api",
]

MIDDLEWARE = [
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "core.urls"
WSGI_APPLICATION = "core.wsgi.application"
APPEND_SLASH = False

# Jobs live in memory only
DATABASES = {}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "UNAUTHENTICATED_USER": None,
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "root": {
        "handlers": ["console"],
        "level": os.getenv("LOG_LEVEL", "INFO"),
    },
}

# Completion API
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o")
OPENAI_TEMPERATURE = 0.7
OPENAI_TIMEOUT = float(os.getenv("OPENAI_TIMEOUT", "60"))

PORT = int(os.getenv("PORT", "3000"))

# Batch job
TRANSLATOR_INPUT_FOLDER = os.getenv("TRANSLATOR_INPUT_FOLDER", "input")
TRANSLATOR_OUTPUT_FOLDER = os.getenv("TRANSLATOR_OUTPUT_FOLDER", "output")
TRANSLATOR_PROMPT_FILE = os.getenv("TRANSLATOR_PROMPT_FILE", "prompt.txt")
TRANSLATOR_FILE_EXTENSION = ".txt"
TRANSLATOR_OUTPUT_PREFIX = "exported_"
TRANSLATOR_DEFAULT_PROMPT = "Translate the following text to English:"

AUTO_PROCESS_ON_STARTUP = os.getenv("AUTO_PROCESS_ON_STARTUP", "True").lower() in ("1", "true", "yes")

import os

# Settings read at import time; tests talk to the app over plain http
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("COOKIE_SECURE", "false")
os.environ.setdefault("APP_URL", "https://app.repospector.test")

import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Deployed URL of the attendance record store (script web-app endpoint).
ENDPOINT_URL = os.getenv("PUNCH_SYNC_ENDPOINT_URL", "")

REQUEST_TIMEOUT = float(os.getenv("PUNCH_SYNC_REQUEST_TIMEOUT", "30"))

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

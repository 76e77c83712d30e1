import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

ENDPOINT_URL = os.getenv("PUNCH_SYNC_ENDPOINT_URL", "")

REQUEST_TIMEOUT = float(os.getenv("PUNCH_SYNC_REQUEST_TIMEOUT", "30"))

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

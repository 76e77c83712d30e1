SECRET_KEY = "test-secret"

ENDPOINT_URL = "https://records.example.test/exec"

REQUEST_TIMEOUT = 5.0

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"

import os

API_URL = os.getenv("API_URL", "http://localhost:8000")

APP_NAME = "TipSplit"

DEFAULT_TIP_PERCENT = 15

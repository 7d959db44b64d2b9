
import os

API_URL = os.getenv("API_URL", "http://localhost:8000")

API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))

APP_NAME = "Mongo Admin"

# Databases the console refuses to drop
PROTECTED_DATABASES = [
    "admin",
    "config",
    "local",
]

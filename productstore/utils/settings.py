# productstore/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

MONGO_URL = os.getenv("MONGO_URL", "mongodb://localhost:27017")
MONGO_DB = os.getenv("MONGO_DB", "productstore")
MONGO_COLLECTION = os.getenv("MONGO_COLLECTION", "products")
MONGO_TIMEOUT_MS = int(os.getenv("MONGO_TIMEOUT_MS", 5000))
MONGO_CONNECT_ATTEMPTS = int(os.getenv("MONGO_CONNECT_ATTEMPTS", 5))

API_KEY_HEADER = os.getenv("API_KEY_HEADER", "myproduct-api-key")
API_KEY = os.getenv("API_KEY", "myproduct-secret-key")

DEFAULT_PAGE = int(os.getenv("DEFAULT_PAGE", 1))
DEFAULT_LIMIT = int(os.getenv("DEFAULT_LIMIT", 10))

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 3000))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

PRODUCT_SERVICE_URL = os.getenv("PRODUCT_SERVICE_URL", f"http://localhost:{PORT}")

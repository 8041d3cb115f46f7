import os
from dotenv import dotenv_values


configs = dotenv_values(".env")

API_TITLE = "dockertest"
# Prefix for all API routes; empty serves `GET /test` at the root
API_PREFIX = os.getenv('API_PREFIX') or configs.get('API_PREFIX') or ""

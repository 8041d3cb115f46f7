# This module contains constants for all apps

import os
from dotenv import dotenv_values 

# Load env vars
configs = dotenv_values(".env")

# Common host (for fallback)
COMMON_HOST = os.getenv('COMMON_HOST') or configs.get('COMMON_HOST')

# Postgres
POSTGRES_HOST = os.getenv('POSTGRES_HOST') or configs.get('POSTGRES_HOST') or COMMON_HOST
POSTGRES_PASSWORD = os.getenv('POSTGRES_PASSWORD') or configs.get('POSTGRES_PASSWORD')
POSTGRES_USER = os.getenv('POSTGRES_USER') or configs.get('POSTGRES_USER') or "postgres"
POSTGRES_DB = os.getenv('POSTGRES_DB') or configs.get('POSTGRES_DB') or "postgres"
POSTGRES_PORT = os.getenv('POSTGRES_PORT') or configs.get('POSTGRES_PORT') or "5432"

# Full SQLAlchemy URL; takes precedence over the Postgres vars above
DATABASE_URL = os.getenv('DATABASE_URL') or configs.get('DATABASE_URL') \
    or f"postgresql://{POSTGRES_USER}:{POSTGRES_PASSWORD}@{POSTGRES_HOST}:{POSTGRES_PORT}/{POSTGRES_DB}"

# Tables
TEST_TABLE = os.getenv('TEST_TABLE') or configs.get('TEST_TABLE') or "test"

# Logging
LOG_LEVEL = (os.getenv('LOG_LEVEL') or configs.get('LOG_LEVEL') or "INFO").upper()

# Backend database session

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from common.config.constants import DATABASE_URL


# Connection and session
engine = create_engine(
    DATABASE_URL,
    pool_pre_ping=True
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

import os

from sqlalchemy.orm import sessionmaker, declarative_base

from shared_common.db import create_db_engine

DB_URL= os.getenv("DATABASE_URL", "sqlite:///./user_service.db")

engine= create_db_engine(DB_URL)
SessionLocal= sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base= declarative_base()

def init_db():
    Base.metadata.create_all(bind=engine)

def get_db():
    db= SessionLocal()
    try:
        yield db
    finally:
        db.close()

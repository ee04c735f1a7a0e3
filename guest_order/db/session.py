from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

class Base(DeclarativeBase): pass

def create_db_engine(dsn: str, echo: bool = False, **kwargs) -> Engine:
    return create_engine(dsn, pool_pre_ping=True, echo=echo, **kwargs)

def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)

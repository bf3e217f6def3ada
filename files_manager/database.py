import sqlalchemy as sa
from fastapi import Request
from sqlalchemy.orm import sessionmaker, declarative_base

Base = declarative_base()


def create_db_engine(database_url: str):
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return sa.create_engine(database_url, pool_pre_ping=True, connect_args=connect_args)


def create_session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


def is_alive(engine) -> bool:
    try:
        with engine.connect() as connection:
            connection.execute(sa.text("SELECT 1"))
    except sa.exc.SQLAlchemyError:
        return False
    return True


def get_db(request: Request):
    database = request.app.state.session_factory()
    try:
        yield database
    finally:
        database.close()

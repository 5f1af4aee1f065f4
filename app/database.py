from sqlmodel import Session, SQLModel, create_engine
from sqlalchemy.pool import StaticPool
from app.core.config import Settings

settings = Settings()


def build_engine(database_url: str, echo: bool = False):
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=echo)
    # SQLite en memoria: una sola conexión compartida entre hilos
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(database_url, echo=echo, connect_args={"check_same_thread": False})


engine = build_engine(settings.database_url, echo=settings.sql_echo)

def get_session():
    with Session(engine) as session:
        yield session

def create_db_and_tables(bind=None):
    import app.models.conversation  # noqa
    import app.models.chat_message  # noqa

    SQLModel.metadata.create_all(bind or engine)

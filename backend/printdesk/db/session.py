"""
Database session management
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from printdesk.core.settings import settings
from printdesk.db.base import Base
from printdesk.logging_config import get_logger

logger = get_logger(__name__)

connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    # FastAPI runs sync endpoints in a threadpool
    connect_args["check_same_thread"] = False

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    pool_pre_ping=True,  # Verify connections before using
    connect_args=connect_args,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db() -> None:
    """Create the orders, colours and filaments tables if they are missing."""
    # Register the table classes on Base.metadata
    from printdesk import models  # noqa: F401

    logger.info("Ensuring database tables exist", extra={"database": engine.url.render_as_string(hide_password=True)})
    Base.metadata.create_all(bind=engine)


def get_db():
    """
    Dependency for getting database session

    Usage in FastAPI endpoints:
        @router.get("/data")
        def list_orders(db: Session = Depends(get_db)):
            return db.query(Order).all()
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

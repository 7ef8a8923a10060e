import time
from sqlalchemy.exc import OperationalError

from services.member_service.app.models.database import engine, Base
from services.member_service.app.models import member  # noqa: F401  registers the member table

RETRIES = 5
RETRY_DELAY_SECONDS = 5

def connect_to_db(retries: int = RETRIES, delay: float = RETRY_DELAY_SECONDS):
    while retries > 0:
        try:
            with engine.connect():
                print("Database connection successful")
                return
        except OperationalError:
            print("Database not ready, retrying...")
            retries -= 1
            time.sleep(delay)
    raise RuntimeError("Could not connect to the database")

def create_tables():
    Base.metadata.create_all(bind=engine)

if __name__ == "__main__":
    connect_to_db()
    create_tables()
    print("Database initialized.")

import uvicorn
from fastapi import FastAPI

from .api import greeting, members
from .config.settings import settings
from .core.logging import configure_logging
from .models.database import engine, Base

logger = configure_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="Member Service",
    description="Microservice for registering and looking up members",
    version="1.0.0",
)

@app.on_event("startup")
def on_startup():
    if settings.MEMBER_REPOSITORY != "memory":
        Base.metadata.create_all(bind=engine)
    logger.info("Member service started with %s repository", settings.MEMBER_REPOSITORY)

@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(greeting.router, tags=["Test"])
app.include_router(
    members.router,
    prefix="/members",
    tags=["Members"],
)


def run():
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()

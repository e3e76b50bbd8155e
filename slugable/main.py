from fastapi import FastAPI
from slugable.database import init_db
from slugable.routes import posts, categories
from slugable.utils.logging_config import setup_logging
import logging
import os

app = FastAPI(title="Slugable")

app.include_router(posts.router)
app.include_router(categories.router)

def initialize_logging():
    """Initialize logging with settings from the environment."""
    level_name = os.getenv("SLUGABLE_LOG_LEVEL", "WARNING").upper()
    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        log_level = logging.WARNING

    try:
        max_bytes = int(os.getenv("SLUGABLE_LOG_MAX_MB", "10")) * 1024 * 1024
        backup_count = int(os.getenv("SLUGABLE_LOG_BACKUP_COUNT", "5"))
    except ValueError:
        max_bytes = 10485760
        backup_count = 5

    setup_logging(max_bytes=max_bytes, backup_count=backup_count, log_level=log_level)
    logging.info(f"Logging initialized at level {logging.getLevelName(log_level)}")

@app.on_event("startup")
def startup_event():
    initialize_logging()
    init_db()

@app.get("/api/health")
async def health():
    return {"status": "ok"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=5710)

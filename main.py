import argparse
import logging
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

import sys
from pathlib import Path

# Add project root to path for package imports
base_dir = Path(__file__).parent
sys.path.insert(0, str(base_dir))

from db.database import init_db, get_db_path
from config import load_config
from routes import items, schedule, calendar  # Import routers
from utils.log import setup_logging

logger = logging.getLogger(__name__)

# First-run init
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: config, logging, DB
    config = load_config()  # Ensures config exists
    setup_logging(config["logging"]["level"], config["logging"]["json"])
    init_db()
    logger.info("LeetSpace started")
    yield

app = FastAPI(
    title="LeetSpace",
    description="Spaced-repetition scheduler for practice questions",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(items.router, prefix="/api/items", tags=["items"])
app.include_router(schedule.router, prefix="/api/schedule", tags=["schedule"])
app.include_router(calendar.router, prefix="/api", tags=["calendar"])  # /api/calendar-stats

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="LeetSpace App")
    parser.add_argument("--init", action="store_true", help="Initialize DB and config")
    parser.add_argument("--dev", action="store_true", help="Run in dev mode with reload")
    args = parser.parse_args()
    config = load_config()  # Ensures config is copied if missing
    if args.init:
        setup_logging(config["logging"]["level"], config["logging"]["json"])
        init_db()
        print(f"DB initialized at {get_db_path()} and config copied to ~/.leetspace/")
        sys.exit(0)
    # Run server
    uvicorn.run(
        "main:app",
        host=config["server"]["host"],
        port=config["server"]["port"],
        reload=args.dev,
        log_level=config["logging"]["level"].lower(),
    )

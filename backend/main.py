from dotenv import load_dotenv
load_dotenv()

import logging

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

import config
from routes import health, lists, todos

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Todo Lists", version="0.1.0")

app.add_middleware(
    SessionMiddleware,
    secret_key=config.SESSION_SECRET,
    session_cookie=config.SESSION_COOKIE,
    max_age=config.SESSION_MAX_AGE,
    same_site="lax",
)

app.include_router(health.router)
app.include_router(lists.router)
app.include_router(todos.router)

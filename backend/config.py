"""
Application configuration read from the environment.

main.py calls load_dotenv() before this module is imported, so values
may also come from a .env file next to the backend:
  SESSION_SECRET=change-me
  SESSION_MAX_AGE=1209600
  LOG_LEVEL=DEBUG
"""

import os
import secrets

# Without an explicit secret every restart invalidates existing cookies
SESSION_SECRET = os.environ.get("SESSION_SECRET") or secrets.token_hex(32)
SESSION_COOKIE = os.environ.get("SESSION_COOKIE", "todo_session")
SESSION_MAX_AGE = int(os.environ.get("SESSION_MAX_AGE", 14 * 24 * 60 * 60))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

BACKEND_ROOT = os.path.dirname(os.path.abspath(__file__))
TEMPLATES_DIR = os.path.join(BACKEND_ROOT, "templates")

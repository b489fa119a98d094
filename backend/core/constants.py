"""
Application constants.

These never change at runtime; Settings takes its defaults from here.
"""

# --- HTTP service ---

DEFAULT_HOST: str = "0.0.0.0"
DEFAULT_PORT: int = 5000

# --- /message route ---

MESSAGE_PATH: str = "/message"
GREETING_MESSAGE: str = "Hello from backend!"

from dotenv import load_dotenv
import os

load_dotenv()

# Base URL of the authentication API (sessions + users endpoints)
SERVER_ENDPOINT = os.getenv("SERVER_ENDPOINT", "http://localhost:1337")

# Root log level name (DEBUG, INFO, WARNING, ...)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

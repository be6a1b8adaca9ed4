"""
Process configuration.

Defaults can be overridden through the environment or a local .env file.
OPENAI_API_KEY is picked up by the OpenAI client itself.
"""

import os

from dotenv import load_dotenv

load_dotenv()


MODEL = os.getenv("LEXILENS_MODEL", "gpt-3.5-turbo")
API_URL = os.getenv("LEXILENS_API_URL", "http://localhost:8000/api")
REDIS_URL = os.getenv("LEXILENS_REDIS_URL", "redis://localhost:6379/0")
CLIENT_ID = os.getenv("LEXILENS_CLIENT_ID", "default")
LOG_LEVEL = os.getenv("LEXILENS_LOG_LEVEL", "INFO")

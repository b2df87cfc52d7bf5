"""Configuration loader for Training Signup with environment-specific support"""

import os
from pathlib import Path

from dotenv import load_dotenv

project_dir = Path(__file__).parent.parent.parent
env_path = project_dir / ".env"

# Load .env file if it exists. For local development only.
if env_path.exists():
    load_dotenv(env_path)

# Configuration dictionary - set once at initialization
config = {
    "database_url": os.getenv("DATABASE_URL", "sqlite:///./training_signup.db"),
    # Optional. When set, change notifications go through redis pub/sub so
    # every worker process sees every insert.
    "redis_url": os.getenv("REDIS_URL"),
    "changes_channel": os.getenv("CHANGES_CHANNEL", "inscricoes-changes"),
    "port": int(os.getenv("PORT", "8000")),
    "log_level": os.getenv("LOG_LEVEL", "INFO"),
    "display_time_zone": os.getenv("DISPLAY_TIME_ZONE", "America/Sao_Paulo"),
    "create_tables": os.getenv("CREATE_TABLES", "false").lower() == "true",
    "debug": os.getenv("DEBUG", "false").lower() == "true",
    "environment": os.getenv("ENVIRONMENT", "development"),
}

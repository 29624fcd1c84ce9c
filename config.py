import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./test.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")

    # Workspace cleaner
    WORKSPACE_INACTIVE_DAYS_BEFORE_NOTIFICATION = int(
        data.get("WORKSPACE_INACTIVE_DAYS_BEFORE_NOTIFICATION", 7)
    )
    WORKSPACE_INACTIVE_DAYS_BEFORE_DELETION = int(
        data.get("WORKSPACE_INACTIVE_DAYS_BEFORE_DELETION", 21)
    )
    MAX_NUMBER_OF_WORKSPACES_DELETED_PER_EXECUTION = int(
        data.get("MAX_NUMBER_OF_WORKSPACES_DELETED_PER_EXECUTION", 5)
    )
    WORKSPACE_CLEANER_CHUNK_SIZE = int(data.get("WORKSPACE_CLEANER_CHUNK_SIZE", 5))

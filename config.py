import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

load_dotenv()

# Optional YAML file next to this module
_CFG_FILE = Path(__file__).with_name("config.yml")
if _CFG_FILE.exists():
    with open(_CFG_FILE, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
else:
    cfg = {}

# Connection
DB_PATH = os.getenv("DB_PATH", "sqlite+aiosqlite:///db.sqlite3")

# Engine / logs
ECHO_SQL = bool(cfg.get("echo_sql", False))
LOG_LEVEL = str(os.getenv("LOG_LEVEL", cfg.get("log_level", "INFO"))).upper()

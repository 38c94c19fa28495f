# settings.py
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()  # reads .env if present


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


PROJECT_ROOT = Path(__file__).parent.resolve()
DB_PATH = os.getenv("DB_PATH", PROJECT_ROOT / "invoice_dashboard.db")
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DB_PATH}")
CREATE_TABLES_ON_STARTUP = _flag("CREATE_TABLES_ON_STARTUP", "true")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret-change-this")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

# Invoice deletion stays off until product confirms it should be reachable.
ALLOW_INVOICE_DELETION = _flag("ALLOW_INVOICE_DELETION", "false")

INVOICES_PATH = "/dashboard/invoices"

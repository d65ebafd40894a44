"""
Centralised configuration constants, read from the environment where it matters.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# ── Log files ────────────────────────────────────────────────────────
PRESCRIPTION_LOG_PATH = os.getenv("RXLOG_PRESCRIPTION_LOG", "presc.txt")
REMARK_LOG_PATH = os.getenv("RXLOG_REMARK_LOG", "remark.txt")

LOG_LEVEL = os.getenv("RXLOG_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# ── Input formats ────────────────────────────────────────────────────
DATE_FORMAT = "%d/%m/%Y"

# ── Prescription rules ───────────────────────────────────────────────
NAME_MIN_LENGTH = 4
NAME_MAX_LENGTH = 15
ADDRESS_MIN_LENGTH = 20
SPHERE_RANGE = (-20.00, 20.00)
CYLINDER_RANGE = (-4.00, 4.00)
AXIS_RANGE = (0.0, 180.0)
OPTOMETRIST_MIN_LENGTH = 8
OPTOMETRIST_MAX_LENGTH = 25

# ── Remark rules ─────────────────────────────────────────────────────
REMARK_MIN_WORDS = 6
REMARK_MAX_WORDS = 20
REMARK_CATEGORIES = ("Client", "Optometrist")
MAX_REMARK_CATEGORIES = 2

# ── API server ───────────────────────────────────────────────────────
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))
RECORD_EXPIRY_HOURS = 8

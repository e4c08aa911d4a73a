"""
Configuration for the Sanrio account backend.

Every setting can be overridden from the environment or a .env file:
- DATA_DIR       directory holding the JSON documents
- ACCOUNTS_FILE  account document (username -> account)
- CATALOG_FILE   character catalog (id -> {name, img})
- HOST / PORT    where uvicorn listens
- LOG_LEVEL

DATA_DIR defaults to the data/ directory of a source checkout. When the
package is installed normally there is no such directory next to it, so set
DATA_DIR (or both file variables) explicitly.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# =============================================================================
# Paths
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.resolve()

DATA_DIR = Path(os.getenv("DATA_DIR", PROJECT_ROOT / "data"))
ACCOUNTS_FILE = Path(os.getenv("ACCOUNTS_FILE", DATA_DIR / "account-manager.json"))
CATALOG_FILE = Path(os.getenv("CATALOG_FILE", DATA_DIR / "sanrio.json"))

# =============================================================================
# Server
# =============================================================================

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

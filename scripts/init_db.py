import sys
import os
import logging

# Ensure we can import skillnest modules
sys.path.append(os.getcwd())

from skillnest.core.config import settings
from skillnest.database import init_db

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    init_db()
    logger.info(f"Schema created on {settings.database_url}")

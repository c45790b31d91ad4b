"""
TechLink Events - Main entry point.

Event registration site and admin dashboard served by aiohttp.
Data and auth live in Supabase.
"""

import logging
import sys
from aiohttp import web

from config.settings import settings
from config.features import features
from core.domain.errors import BackendNotConfigured
from infrastructure.database.supabase_client import get_supabase
from adapters.web.app import create_app
from adapters.web.loader import build_supabase_services

# Console plus app.log
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler("app.log", encoding="utf-8"),
    ],
)
logger = logging.getLogger(__name__)

# DEBUG applies to our packages only
if features.DEBUG_MODE:
    for name in ['adapters', 'core', 'infrastructure', '__main__']:
        logging.getLogger(name).setLevel(logging.DEBUG)
    # Supabase SDK transport chatter
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
    logging.getLogger('hpack').setLevel(logging.WARNING)


def main():
    """Validate configuration, then serve the site until interrupted."""
    logger.info("=== TechLink Events Starting ===")
    logger.info(f"Environment: {settings.env}")
    logger.info("Feature Flags:")
    for key, value in features.to_dict().items():
        logger.info(f"  {key}: {value}")

    try:
        get_supabase()
    except BackendNotConfigured as e:
        logger.error(e.message)
        logger.error("Hint: check your .env or deployment variables")
        sys.exit(1)

    app = create_app(build_supabase_services(), settings)
    logger.info(f"Serving on http://{settings.host}:{settings.port}")
    web.run_app(app, host=settings.host, port=settings.port, print=None)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logger.info("Stopped by user (Ctrl+C)")

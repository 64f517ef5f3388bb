"""Command line interface for running the API server."""
import logging
import sys

import uvicorn

from config import load_config, SettingsError
from . import create_app

logger = logging.getLogger(__name__)

def main():
    """Load settings and serve the API until interrupted."""
    try:
        settings = load_config()
    except SettingsError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    # Configure logging
    logging.basicConfig(
        level=settings['log_level'],
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    logger.info(f"Starting API server on {settings['host']}:{settings['port']}")
    uvicorn.run(
        create_app(settings),
        host=settings['host'],
        port=settings['port'],
        log_level=settings['log_level'].lower()
    )

if __name__ == "__main__":
    main()

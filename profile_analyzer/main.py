import logging
import sys

import uvicorn
from dotenv import load_dotenv

from profile_analyzer.api.app import create_app
from profile_analyzer.infrastructure.config import Settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)
logger = logging.getLogger(__name__)

def main():
    # Load environment variables from .env file
    load_dotenv()

    settings = Settings.from_env()

    # A missing token is reported per request, so the server still starts
    if settings.github_token is None:
        logger.warning("GITHUB_TOKEN is not set in the environment. Analyses will fail until it is configured.")

    app = create_app(settings)

    logger.info(f"Backend listening on {settings.port}")
    uvicorn.run(app, host="0.0.0.0", port=settings.port)

if __name__ == "__main__":
    main()

import argparse
import logging

import uvicorn

from stockmetrics.config import get_settings
from stockmetrics.core.logging import setup_logging

logger = logging.getLogger(__name__)


def parse_args():
    parser = argparse.ArgumentParser(description="Serve the stock metrics API.")
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart on code changes (local development only).",
    )
    return parser.parse_args()


def main():
    setup_logging()
    args = parse_args()
    settings = get_settings()

    logger.info("Starting %s (%s) on %s:%s", settings.APP_NAME, settings.ENVIRONMENT, args.host, args.port)
    uvicorn.run(
        "stockmetrics.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()

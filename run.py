#!/usr/bin/env python3
"""
Run script for the Order Management API
"""

import argparse
import sys
from dotenv import load_dotenv

# Load environment variables from .env file before the app reads them
load_dotenv()

from app import create_app
from app.build import build_database
from app.logger import get_logger

logger = get_logger("order_management.run")


def parse_arguments(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description='Order Management API')
    parser.add_argument('--build-only', action='store_true',
                        help='Create database tables and exit without starting the server')
    parser.add_argument('--seed', action='store_true',
                        help='Insert development seed users and products after creating tables')
    parser.add_argument('--port', type=int, default=None,
                        help='Override the PORT setting')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_arguments(argv)

    app = create_app()
    logger.debug("Starting Order Management API...")

    build_database(app, seed=args.seed)

    if args.build_only:
        logger.debug("Build completed. Exiting without starting web server.")
        return 0

    host = app.config['HOST']
    port = args.port or app.config['PORT']
    debug_mode = app.config['DEBUG']

    if debug_mode:
        logger.warning("DEBUG MODE ENABLED - Do not use in production!")

    logger.info(f"Starting server on {host}:{port} (debug={debug_mode})")
    app.run(debug=debug_mode, host=host, port=port, use_reloader=False)
    return 0


if __name__ == '__main__':
    sys.exit(main())

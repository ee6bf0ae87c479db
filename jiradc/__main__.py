"""
Command-line entry point for the Jira MCP server.

Usage:
    python -m jiradc [--log-level LEVEL]
"""

import argparse
import logging
import sys

from dotenv import load_dotenv

from jiradc.config.settings import validate_config
from jiradc.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    """Parse arguments, check configuration and serve MCP over stdio."""
    parser = argparse.ArgumentParser(description="Jira Data Center MCP server")
    parser.add_argument("--log-level", type=str, default=None, help="Log level (default: LOG_LEVEL or INFO)")
    args = parser.parse_args()

    load_dotenv()
    setup_logging(level=args.log_level)

    missing = validate_config()
    if missing:
        logger.error("Missing required environment variables: %s", ", ".join(missing))
        return 1

    from jiradc.tools.mcp.mcp_jira_server import start_server

    start_server()
    return 0


if __name__ == "__main__":
    sys.exit(main())

import argparse
import logging
import os
import sys

# スクリプトとして直接起動した場合でも japan_legal を import できるようにする
current_dir = os.path.dirname(os.path.abspath(__file__))
if current_dir not in sys.path:
    sys.path.insert(0, current_dir)

from japan_legal import config
from japan_legal.server import mcp

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Japan legal research MCP server.")
    parser.add_argument(
        "--transport",
        choices=["streamable-http", "stdio"],
        default=config.MCP_TRANSPORT,
        help="MCP transport (default: %(default)s)",
    )
    parser.add_argument("--port", type=int, default=config.PORT, help="HTTP port (default: %(default)s)")
    args = parser.parse_args()

    # stdio の場合は stdout を MCP が使うのでログは stderr へ
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if args.transport == "streamable-http":
        mcp.settings.port = args.port
        logger.info(f"Japan Legal MCP Server running on http://localhost:{args.port}/mcp")
    mcp.run(transport=args.transport)


if __name__ == "__main__":
    main()

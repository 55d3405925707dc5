"""
ZodSmith MCP Server Entry Point.

Usage:
    python run_mcp_server.py                             # stdio
    python run_mcp_server.py --transport sse --port 8080
"""

import argparse
import asyncio
import sys

from zodsmith.config import get_config
from zodsmith.mcp_server import get_mcp_tools, run_mcp_server


def main():
    config = get_config()

    parser = argparse.ArgumentParser(
        description="ZodSmith MCP Server (defaults come from MCP_TRANSPORT, MCP_HOST and MCP_PORT)",
    )
    parser.add_argument("--transport", choices=["stdio", "sse"], default=config.mcp_transport)
    parser.add_argument("--host", default=config.mcp_host)
    parser.add_argument("--port", type=int, default=config.mcp_port)
    args = parser.parse_args()

    tools = ", ".join(t["name"] for t in get_mcp_tools())
    where = f" on {args.host}:{args.port}" if args.transport == "sse" else ""
    # stdout carries the protocol in stdio mode
    print(f"zodsmith-mcp ({args.transport}{where}): {tools}", file=sys.stderr)

    try:
        asyncio.run(run_mcp_server(transport=args.transport, host=args.host, port=args.port))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Podcast Feed Resolver

An MCP server that turns a podcast profile URL (Spotify, Overcast, Apple
Podcasts, Acast, Castos, Libsyn, Transistor, Pocket Casts or a plain RSS
feed) into a list of playable episodes by locating and parsing the show's
RSS feed.

Also serves POST /fetch-podcasts and GET /debug-rss over HTTP transports.
"""

import os
import sys

from podcast_resolver.server import get_server, initialize_server, set_components, shutdown_server

# Initialize server components at module level for FastMCP CLI
config, http_client, resolver = initialize_server()
set_components(config, http_client, resolver)

# Expose mcp variable for FastMCP CLI
mcp = get_server()


def main():
    """Main entry point for the MCP server."""
    try:
        server = get_server()

        transport = os.getenv("MCP_TRANSPORT", "stdio")

        if transport in ["http", "sse", "streamable-http"]:
            host = os.getenv("MCP_HTTP_HOST", "0.0.0.0")
            port = int(os.getenv("MCP_HTTP_PORT", "8080"))
            print(f"[INFO] Starting {transport} transport on {host}:{port}", file=sys.stderr)
            server.run(transport=transport, host=host, port=port)
        else:
            print("[INFO] Starting stdio transport", file=sys.stderr)
            server.run()

    except KeyboardInterrupt:
        print("\n[INFO] Server stopped by user", file=sys.stderr)
        sys.exit(0)
    except Exception as e:
        print(f"[ERROR] Server failed to start: {str(e)}", file=sys.stderr)
        sys.exit(1)
    finally:
        shutdown_server()


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
MCP Stdio-to-HTTP Bridge

Reads MCP JSON-RPC messages from stdin, forwards them to a remote
streamable-HTTP server, and writes every reply message to stdout.

Usage: python3 mcp_bridge.py <server-url>
"""

from relay.controllers.bridge import main

if __name__ == "__main__":
    main()

"""
mcp-http-relay - Bridges a stdio JSON-RPC client to a streamable-HTTP server.

Lines read from stdin are POSTed to a remote endpoint; JSON and event-stream
replies are written back to stdout, one message per line.
"""

__version__ = "0.3.0"

#!/usr/bin/env python3
"""Entrypoint for deploying the Magento MCP Server.

Usage:
    python main.py [--host HOST] [--port PORT]
"""

from magento_mcp.cli import main

if __name__ == "__main__":
    main()

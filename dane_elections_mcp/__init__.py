"""
Dane County Elections MCP server package.

This package exposes the read-only Dane County elections API
(https://api.danecounty.gov) as MCP tools:
- Election listing and details
- Last published timestamps
- Races per election
- Election-wide, per-race and precinct-level results

Layout:
- Configuration loading (`config`)
- Upstream HTTP client (`api_client`)
- Tool registry and tool definitions (`tools`)
- Dispatch and response envelopes (`dispatcher`)
- stdio and HTTP transports (`main`, `http_server`)
"""

__version__ = "1.0.0"

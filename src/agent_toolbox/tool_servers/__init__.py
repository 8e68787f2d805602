"""MCP tool servers: launch descriptors and the supervisor that runs them."""

"""Tool definitions and the registry that builds them."""

# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP wrappers around core/reddit.py.
#
# Each tool here:
#   1. Declares its parameters (types, defaults, enums, bounds) in the function
#      signature so FastMCP can publish a JSON schema
#   2. Logs the call to stderr
#   3. Delegates to core/ and converts core errors into MCP error results
#
# Tools carry no Reddit logic of their own.
# =============================================================================

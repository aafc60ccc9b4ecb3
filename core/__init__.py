# =============================================================================
# core/__init__.py
# =============================================================================
# All Reddit logic lives here: configuration, argument extraction, the HTTP
# fetcher, typed decoding and the text formatters.
#
# Nothing in this package imports FastMCP or Google ADK.  Every module can be
# imported and tested in a bare Python REPL, and only core/client.py touches
# the network.
# =============================================================================

# =============================================================================
# core/__init__.py
# =============================================================================
# The ID resolution pipeline: parsing, namespaces, ENS lookup, line slicing
# and response formatting.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP.  The only third-party code
#   reached from here is web3.py, and only through core/ens_client.py and
#   the InvalidName check in core/fetcher.py.
# =============================================================================

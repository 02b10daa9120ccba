"""
Boundary layer.

Adapters for external systems: Amazon Bedrock and the local source files.
"""

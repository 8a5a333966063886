"""Web-framework adapters for response descriptors."""

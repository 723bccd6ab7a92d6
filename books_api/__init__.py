"""Single-item book lookup service backed by DynamoDB."""

__version__ = "0.1.0"

"""Document Q&A service over a sales CSV and a project PDF, backed by Amazon Bedrock."""

__version__ = "0.1.0"

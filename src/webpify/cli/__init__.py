"""Command-line interface for webpify."""

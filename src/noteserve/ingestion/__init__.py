"""Markdown note ingestion."""

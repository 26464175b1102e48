"""Ingestion layer for event sources."""

from eventkalender.ingestion.json_reader import JSONReader

__all__ = ["JSONReader"]

"""FactPages ingestion pipeline.

This package tokenizes CSV lines, coerces tokens and streams typed
records from HTTP, S3 or local sources with per-line fault isolation.
"""

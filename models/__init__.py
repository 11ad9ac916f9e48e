"""Pydantic models for records, requests and statistics results."""

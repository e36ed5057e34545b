"""Pydantic models for operation options and response envelopes."""

"""Adapters translating calendrical values to bytes, JSON payloads and SQL columns."""

"""API Schemas — Pydantic models for request/response validation at the HTTP boundary."""

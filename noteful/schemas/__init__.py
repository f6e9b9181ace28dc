"""Pydantic request/response schemas shared by routes, services and serializers."""

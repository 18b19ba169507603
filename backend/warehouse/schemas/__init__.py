"""Pydantic request/response models describing the HTTP contract."""

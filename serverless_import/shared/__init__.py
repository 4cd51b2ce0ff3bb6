"""Shared infrastructure: exceptions, interfaces, logging and config utilities."""

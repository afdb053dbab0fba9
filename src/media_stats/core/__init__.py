"""Core domain: models, interfaces and services."""

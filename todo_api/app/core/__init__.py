"""Configuration, logging and in-memory storage."""

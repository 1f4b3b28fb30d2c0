"""Core module for labprotocol."""

"""Framework-agnostic display helpers shared by every front end."""

"""Config – environment-driven settings and their validation errors."""

"""Config recipes."""

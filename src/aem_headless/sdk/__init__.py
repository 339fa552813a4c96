"""Public client surface and configuration loading."""

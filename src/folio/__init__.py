"""Client-side state layer for the developer portfolio API."""

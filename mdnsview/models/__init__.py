"""Domain models for the mdnsview TUI."""

"""Static constants for tcalint."""

"""Game constants and per-session parameters."""

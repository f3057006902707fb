"""Round/turn state machine, timers, and session control."""

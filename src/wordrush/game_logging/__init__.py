"""JSONL game logs."""

"""Turn-based text-command world simulation core."""

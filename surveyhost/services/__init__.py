"""Survey parsing, survey loading and the read-through cache service."""

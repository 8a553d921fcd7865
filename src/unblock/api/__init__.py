"""HTTP API for driving a puzzle session."""

"""HTTP API for playing games against the move legality rules."""

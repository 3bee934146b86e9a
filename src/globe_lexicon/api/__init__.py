"""HTTP API for the GloBE Lexicon."""

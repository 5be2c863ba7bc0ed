"""poke-search command-line backend: matching engine, settings and CLI."""

"""HTTP API, configuration and LLM providers."""

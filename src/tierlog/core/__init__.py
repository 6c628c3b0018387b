"""Core domain: levels, records, the handler port, routing and the logger."""

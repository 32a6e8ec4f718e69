"""API contracts: request, response and envelope schemas."""

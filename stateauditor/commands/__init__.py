"""StateAuditor command implementations."""

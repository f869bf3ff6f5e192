"""StateAuditor - useState value + setter naming audit for React code."""

__version__ = "0.1.0"

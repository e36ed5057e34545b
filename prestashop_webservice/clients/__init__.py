"""HTTP transport and the web service client built on top of it."""

"""Request boundary - pydantic schemas and thin views over the container."""

"""Sample instance generators."""

"""fslink - track and toggle filesystem links for a project."""

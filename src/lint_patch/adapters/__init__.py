"""Host integrations for lint_patch."""

"""GitHub Actions integration: workflow commands and the action flow."""

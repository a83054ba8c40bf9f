"""External service integrations for clickup-report."""

"""Runtime services: telemetry and logging."""

"""Interface layer: demo drivers and catalog command handlers."""

"""HTTP API for the Park Locator application."""

"""Domain layer - Core configuration model for the relay controller client.

This package contains the configuration contract of a GPIO/relay controller
polling client, free from any file format or framework dependencies. It
defines:

- Value objects (endpoint, timing policy, output table, aggregate config)
- Repository interfaces for reading raw configuration records
- The ConfigError raised on validation failures

The domain layer represents the "what" of the system - the rules a
configuration must satisfy before any poller may use it.
"""

"""Configuration: settings, constants, schema, guard rules and prompts."""

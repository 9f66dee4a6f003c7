"""Services Layer - resource handlers that turn a validated request into persistence calls."""

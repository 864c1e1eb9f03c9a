"""cas-scenarios: browser-driven authorization checks against a CAS server."""
__version__ = "0.1.0"

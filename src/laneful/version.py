"""Package version and API constants."""

__version__ = "1.0.1"

API_VERSION = "v1"
USER_AGENT = f"laneful-python/{__version__}"

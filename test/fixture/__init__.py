from .log import LogCapture  # noqa: F401

import logging

ROOT_LOGGER_NAME = "heapqueue"

# Library logging stays silent unless the host application configures handlers
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a child of the project logger, e.g. ``heapqueue.heap_``."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")

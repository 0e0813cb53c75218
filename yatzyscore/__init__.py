from loguru import logger

try:
    from ._version import version as __version__
except ImportError:  # not installed
    __version__ = "unknown"

# silent when used as a library, the CLI enables logging
logger.disable("yatzyscore")

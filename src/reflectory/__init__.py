import importlib.metadata
import logging

__version__ = importlib.metadata.version("reflectory")


logger = logging.getLogger("reflectory")
logger.setLevel(logging.INFO)

import logging

logger = logging.getLogger("linemark")
logger.setLevel(logging.INFO)

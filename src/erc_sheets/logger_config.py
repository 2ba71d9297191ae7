import logging
import os

# Configure the package logger
logger = logging.getLogger('erc_sheets')
logger.setLevel(logging.DEBUG if os.getenv('DEBUG') else logging.INFO)

# Importing twice must not duplicate output
if not logger.handlers:
    ch = logging.StreamHandler()
    ch.setLevel(logging.DEBUG)
    ch.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    logger.addHandler(ch)

# Export the logger
__all__ = ['logger']

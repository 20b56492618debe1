'''
Logging configuration for the rpn4 logger namespace.
'''
import logging
import sys
from typing import Optional


FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATEFMT = '%H:%M:%S'


def setup_logging(level: int = logging.WARNING,
                  log_file: Optional[str] = None) -> logging.Logger:
    '''
    Configure the 'rpn4' logger.

    :param level: Logging level (e.g., logging.DEBUG).
    :param log_file: Optional path to also write logs to.
    '''
    logger = logging.getLogger('rpn4')
    logger.setLevel(level)

    # Don't double up handlers if called again
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(FORMAT, datefmt=DATEFMT)

    # stdout is for the stack
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a',
                                           encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug('Logging initialized.')
    return logger

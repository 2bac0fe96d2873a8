# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

import logging
import logging.config
import os

import consts

logging_initialized = False

def init():
    global logging_initialized

    if logging_initialized:
        return

    # Only an explicitly named config is applied; fileConfig replaces the
    # root logger's handlers, which belong to the host program.
    config_file = os.environ.get(consts.LOGGING_CONFIG_ENV)
    if config_file:
        logging.config.fileConfig(\
            config_file, disable_existing_loggers=False)

    logger = logging.getLogger(__name__)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Logger initialized from [{}].".format(config_file))

    logging_initialized = True

if not logging_initialized:
    init()

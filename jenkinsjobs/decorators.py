# SPDX-FileCopyrightText: 2014-2023 CERN
# SPDX-License-Identifier: GPL-3.0-or-later

import logging

from functools import wraps
from time import time

def timed(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        start = time()
        result = func(*args, **kwargs)
        elapsed = time() - start
        logging.info("Executed '%s' in %.2f ms", func.__name__, elapsed*1000)
        return result
    return wrapper

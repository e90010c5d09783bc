"""
Utilities for all kinds of needs (funcs, regex, logging, pygame)
"""
from functools import cache

from pgcss.config import logger

from .func import *
from .regex import *

debug_once = cache(logger.debug)
""" Logs every distinct message only once """

"""
Module dependencies:
    basetypes.py:
        imports typing
    config.py:
        imports contextlib, logging
        requires pydantic
    curry.py:
        depends on basetypes, config
        imports functools, inspect, logging
    functions.py:
        depends on basetypes, curry
        requires toolz
    objects.py:
        depends on basetypes, curry
        requires toolz
    functors.py:
        depends on basetypes, curry
        imports abc
    lenses.py:
        depends on basetypes, curry, functions, objects, functors

Requirements:
    pydantic
    toolz
"""
from optica.basetypes import Placeholder, PLACEHOLDER, __, is_placeholder
from optica.config import Settings, settings, set_exception_handler, get_exception_handler, exception_handler
from optica.curry import *
from optica.functions import *
from optica.objects import *
from optica.functors import *
from optica.lenses import *

__version__ = '0.1'

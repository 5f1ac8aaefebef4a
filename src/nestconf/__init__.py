import functools

from loguru import logger

from .base import Configuration
from .error import (  # noqa: F401
    AttributeExistsError,
    BadCallError,
    ConfEncodeError,
    ConfError,
    ConfSyntaxError,
    ConfTypeError,
    ConfValueError,
    InvalidArgumentError,
    ReservedNameError,
    UndefinedAttributeError,
)


logger.disable(__name__)

Mode = Configuration.Mode


@functools.wraps(Configuration.loads, assigned=('__doc__',), updated=())
def loads(*args, **kwargs):
    return Configuration.loads(*args, **kwargs)


@functools.wraps(Configuration.from_json, assigned=('__doc__',), updated=())
def from_json(*args, **kwargs):
    return Configuration.from_json(*args, **kwargs)

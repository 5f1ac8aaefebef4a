"""Support for configuration text formats."""
import json

import toml
import yaml
from descriptors import classproperty

from .datastructure import CallableEnum, NamedEnum


class tag:
    """decorator tagging a function with an attribute, e.g. the errors it raises"""

    _undefined_ = object()

    def __init__(self, name, value=_undefined_):
        self.name = name
        self.value = value

    def __call__(self, value_or_target):
        if self.value is self._undefined_:
            return self.__class__(self.name, value_or_target)

        setattr(value_or_target, self.name, self.value)
        return value_or_target

    def __repr__(self):
        value = 'Undefined' if self.value is self._undefined_ else repr(self.value)
        return f"{self.__class__.__name__}({self.name!r}, {value})"


raises = tag('raises')


class _FormatEnum(NamedEnum, CallableEnum):

    @classproperty
    def __names__(cls):
        return [member.name for member in cls]

    @property
    def raises(self):
        return getattr(self.value, 'raises', ())


class SLoader(_FormatEnum):
    """Decoders of configuration text into nested builtin data."""

    @CallableEnum.member
    @raises((json.JSONDecodeError, RecursionError, UnicodeDecodeError))
    def json(text):
        return json.loads(text)

    @CallableEnum.member
    @raises((toml.TomlDecodeError, RecursionError, UnicodeDecodeError))
    def toml(text):
        if isinstance(text, bytes):
            text = text.decode()

        return toml.loads(text)

    @CallableEnum.member
    @raises((yaml.YAMLError, RecursionError))
    def yaml(text):
        conf = yaml.safe_load(text)
        return {} if conf is None else conf


class Dumper(_FormatEnum):
    """Encoders of nested builtin data into configuration text."""

    @CallableEnum.member
    @raises((TypeError, ValueError))
    def json(obj):
        return json.dumps(obj)

    @CallableEnum.member
    @raises((TypeError, ValueError))
    def toml(obj):
        return toml.dumps(obj)

    @CallableEnum.member
    @raises(yaml.YAMLError)
    def yaml(obj):
        return yaml.safe_dump(obj)

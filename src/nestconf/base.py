"""Recursive configuration nodes with declared attributes."""
import collections.abc
import pprint

from descriptors import classonlymethod
from loguru import logger

from .datastructure import NamedEnum, StrEnum
from .error import (
    AttributeExistsError,
    BadCallError,
    ConfEncodeError,
    ConfSyntaxError,
    ConfTypeError,
    ConfValueError,
    ReservedNameError,
    UndefinedAttributeError,
)
from .format import Dumper, SLoader


def _invocable_(value):
    return callable(value) and not isinstance(value, type)


class Configuration:
    """Tree of declared attributes, accessible by key or by attribute.

    Nested mappings, sequences and other nodes are wrapped into child
    nodes as they are assigned, and unwrapped by `to_dict()`.

    A name must be declared, via the source mapping or `define()`, before
    it may be read or written. Under `Mode.execute_callable`, reading a
    callable attribute returns the result of calling it with the node.

    """
    class Mode(NamedEnum, StrEnum):

        no_execute = 'no_execute'
        execute_callable = 'execute_callable'

    _Dumper = Dumper
    _Loader = SLoader

    __operations__ = frozenset((
        'initialize',
        'define',
        'get',
        'set',
        'isset',
        'unset',
        'call',
        'to_dict',
        'dumps',
        'loads',
        'from_json',
        '__getitem__',
        '__setitem__',
        '__delitem__',
        '__contains__',
        '__getattr__',
        '__setattr__',
        '__delattr__',
        '__iter__',
        '__len__',
        '__str__',
        '__repr__',
    ))

    def __init__(self, source=None, mode=Mode.no_execute, *, path=()):
        try:
            mode = self.Mode(mode)
        except ValueError:
            mode = self.Mode.lookup(mode, ConfValueError)

        object.__setattr__(self, '__mode__', mode)
        object.__setattr__(self, '__path__', tuple(path))
        object.__setattr__(self, '__attributes__', {})

        self.initialize(source)

    @classonlymethod
    def loads(cls, text, format_='json', mode=Mode.no_execute):
        """Construct a node from configuration text of the given format."""
        loader = cls._Loader.lookup(format_, ConfValueError, 'format')

        if not isinstance(text, (str, bytes)):
            raise ConfTypeError(f"{loader.name} text must be str or bytes not {type(text).__name__}")

        try:
            data = loader(text)

            if data is not None and not isinstance(data, (dict, list)):
                raise ConfTypeError(f"{loader.name} document is not an object or array: "
                                    f"{type(data).__name__}")

            return cls(data, mode)
        except (*loader.raises, RecursionError) as exc:
            error = ConfSyntaxError(loader.name, exc)
            logger.debug("{} decode failed: {}", loader.name, error.category.name)
            raise error from exc

    @classonlymethod
    def from_json(cls, text, mode=Mode.no_execute):
        """Construct a node from JSON text."""
        return cls.loads(text, 'json', mode)

    def initialize(self, source=None):
        """Replace all attributes with those of `source`."""
        pairs = self._pairs_(source)
        attributes = self.__attributes__

        object.__setattr__(self, '__attributes__', {})

        try:
            for (name, value) in pairs:
                self.define(name, value)
        except Exception:
            object.__setattr__(self, '__attributes__', attributes)
            logger.debug("initialization of {} rolled back", self._label_())
            raise

        return self

    def define(self, name, value=None):
        """Declare attribute `name` with initial `value`."""
        key = self._key_(name)

        if key in self.__attributes__:
            raise AttributeExistsError(f'The attribute "{self._label_(key)}" already exists.')

        self.__attributes__[key] = self._prepare_(key, value)
        return self

    def get(self, name):
        key = self._check_(name)
        value = self.__attributes__[key]

        if self.__mode__ is self.Mode.execute_callable and _invocable_(value):
            return value(self)

        return value

    def set(self, name, value):
        key = self._check_(name)
        self.__attributes__[key] = self._prepare_(key, value)

    def isset(self, name):
        try:
            key = self._key_(name)
        except ConfTypeError:
            return False

        return self.__attributes__.get(key) is not None

    def unset(self, name):
        try:
            key = self._key_(name)
        except ConfTypeError:
            return

        if key in self.__attributes__:
            self.__attributes__[key] = None

    def call(self, name, /, *args, **kwargs):
        """Call attribute `name` with the given arguments, in any mode."""
        try:
            key = self._key_(name)
            value = self.__attributes__[key]
        except (ConfTypeError, KeyError):
            value = None

        if not _invocable_(value):
            raise BadCallError(f'Undefined method "{self._label_(name)}" called.')

        return value(*args, **kwargs)

    def to_dict(self):
        """Resolve all attributes into a plain dict with sorted keys."""
        values = {}

        for name in self.__attributes__:
            value = self.get(name)
            values[name] = value.to_dict() if isinstance(value, Configuration) else value

        return dict(sorted(values.items()))

    def dumps(self, format_='json'):
        """Encode `to_dict()` as text of the given format."""
        dumper = self._Dumper.lookup(format_, ConfValueError, 'format')

        try:
            return dumper(self.to_dict())
        except dumper.raises as exc:
            logger.debug("{} encode of {} failed: {}", dumper.name, self._label_(), exc)
            raise ConfEncodeError(dumper.name, exc) from exc

    def _key_(self, name):
        if isinstance(name, str):
            return name

        if isinstance(name, int) and not isinstance(name, bool):
            return str(name)

        raise ConfTypeError(f"attribute name must be str or int not {type(name).__name__}")

    def _check_(self, name):
        key = self._key_(name)

        if key not in self.__attributes__:
            raise UndefinedAttributeError(f'The attribute "{self._label_(key)}" does not exist.')

        return key

    def _prepare_(self, key, value):
        if (
            self.__mode__ is self.Mode.execute_callable
            and _invocable_(value)
            and key in self.__operations__
        ):
            raise ReservedNameError(
                f'The attribute "{self._label_(key)}" is already defined as an operation.'
            )

        if self._nests_(value):
            return self.__class__(value, self.__mode__, path=self.__path__ + (key,))

        return value

    def _label_(self, name=None):
        path = self.__path__ if name is None else self.__path__ + (str(name),)
        return '.'.join(path) or '<root>'

    @staticmethod
    def _nests_(value):
        return isinstance(value, (collections.abc.Mapping, Configuration, list, tuple))

    @classmethod
    def _pairs_(cls, source):
        if source is None:
            return ()

        if isinstance(source, Configuration):
            return tuple(source)

        if isinstance(source, collections.abc.Mapping):
            return tuple(source.items())

        if isinstance(source, (list, tuple)):
            return tuple((str(index), value) for (index, value) in enumerate(source))

        raise ConfTypeError(f"attributes must be a mapping or sequence not {type(source).__name__}")

    def __getitem__(self, name):
        return self.get(name)

    def __setitem__(self, name, value):
        self.set(name, value)

    def __delitem__(self, name):
        self.unset(name)

    def __contains__(self, name):
        return self.isset(name)

    def __getattr__(self, name):
        if name.startswith('__') and name.endswith('__'):
            raise AttributeError(f"'{self.__class__.__name__}' object has no attribute {name!r}")

        return self.get(name)

    def __setattr__(self, name, value):
        if name.startswith('__') and name.endswith('__'):
            object.__setattr__(self, name, value)
        else:
            self.set(name, value)

    def __delattr__(self, name):
        if name.startswith('__') and name.endswith('__'):
            object.__delattr__(self, name)
        else:
            self.unset(name)

    def __iter__(self):
        yield from tuple(self.__attributes__.items())

    def __len__(self):
        return len(self.__attributes__)

    def __str__(self):
        return pprint.pformat(self.to_dict())

    def __repr__(self):
        path = f", path={'.'.join(self.__path__)!r}" if self.__path__ else ""
        return (f"<{self.__class__.__name__}"
                f"({self.__mode__.value!r}{path}) "
                f"-> {self.__attributes__!r}>")

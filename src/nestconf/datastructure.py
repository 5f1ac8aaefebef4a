"""Enum helpers for node modes and the format registries."""
import enum
import functools


class NamedEnumMeta(enum.EnumMeta):

    def lookup(cls, name, error, label=None):
        """Retrieve the member `name`, or raise `error` listing the choices."""
        if isinstance(name, cls):
            return name

        try:
            return cls[name]
        except (KeyError, TypeError):
            names = ', '.join(member.name for member in cls)
            raise error(f"unsupported {label or cls.__name__.lower()} {name!r} "
                        f"(expected one of: {names})") from None


class NamedEnum(enum.Enum, metaclass=NamedEnumMeta):
    pass


class StrEnum(str, enum.Enum):

    def __str__(self):
        return str(self.value)


class CallableEnum(enum.Enum):
    """Enum whose members call through to their (function) values."""

    def __call__(self, *args, **kwargs):
        return self.value(*args, **kwargs)


class callable_member:
    """Wrap a function so that Enum keeps it as a member value.

    Attributes tagged onto the function (such as `raises`) are copied
    onto the wrapper.

    """
    def __init__(self, func):
        functools.update_wrapper(self, func)
        self.__func__ = func

    def __call__(self, *args, **kwargs):
        return self.__func__(*args, **kwargs)


CallableEnum.member = callable_member

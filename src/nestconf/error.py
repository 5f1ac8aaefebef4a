from .datastructure import StrEnum


class ConfError(Exception):
    pass


class InvalidArgumentError(ValueError, ConfError):
    pass


class ConfTypeError(TypeError, InvalidArgumentError):
    pass


class ConfValueError(InvalidArgumentError):
    pass


class ConfSyntaxError(InvalidArgumentError):

    class Category(StrEnum):

        depth = 'Maximum stack depth exceeded'
        encoding = 'Malformed UTF-8 characters, possibly incorrectly encoded'
        syntax = 'Syntax error, malformed {format}'
        unknown = 'Unknown error'

    def __init__(self, format_, decode_err):
        super().__init__(format_, decode_err)
        self.format = format_
        self.decode_err = decode_err

    @property
    def category(self):
        # UnicodeDecodeError is also a ValueError: test it first
        if isinstance(self.decode_err, RecursionError):
            return self.Category.depth

        if isinstance(self.decode_err, UnicodeError):
            return self.Category.encoding

        if self.decode_err is not None:
            return self.Category.syntax

        return self.Category.unknown

    def __str__(self):
        label = str(self.format).upper()
        message = self.category.value.format(format=label)

        if self.decode_err is None:
            return f'{label} parse error: {message}'

        return f'{label} parse error: {message}: {self.decode_err}'


class ConfEncodeError(InvalidArgumentError):

    def __init__(self, format_, error):
        super().__init__(format_, error)
        self.format = format_
        self.error = error

    def __str__(self):
        return f'{str(self.format).upper()} encode error: {self.error}'


class AttributeExistsError(InvalidArgumentError):
    pass


class UndefinedAttributeError(AttributeError, InvalidArgumentError):
    pass


class ReservedNameError(InvalidArgumentError):
    pass


class BadCallError(LookupError, ConfError):
    pass

## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class DashOptsError(Exception):
    def __init__(self, message: str = "", *, token=None, position=None):
        """Base class for all errors raised while declaring or scanning options."""
        super().__init__(message)
        self.token: str = token
        self.position: int = position


class DeclarationSyntaxError(DashOptsError, SyntaxError):
    """Malformed declaration string; only raised while parsing, never while scanning."""
    def __init__(self, message, *, declaration=None, char=None, column=None):
        super().__init__(message, token=declaration, position=column)
        self.declaration = declaration
        self.char = char
        self.column = column

    def __str__(self):
        # SyntaxError.__str__ would try to format filename/lineno instead.
        return self.args[0] if self.args else ""


class OptionReferenceError(DashOptsError, ReferenceError):
    pass

class OptionCollisionError(OptionReferenceError):
    def __init__(self, message, *, first=None, second=None, positions=(None, None)):
        super().__init__(message, token=str(second) if second is not None else None, position=positions[1])
        self.first = first
        self.second = second
        self.positions = positions

class MissingValueError(OptionReferenceError):
    pass

class UnknownOptionError(OptionReferenceError):
    pass

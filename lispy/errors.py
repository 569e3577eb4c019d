# Host-level exceptions only. Language errors are ordinary values, see
# lispy.types.error.Error.


class LispyError(Exception):
    """ Base class for all Lispy host errors"""
    pass


class LispyInvalidSymbol(LispyError):
    """ Raised when Python code binds a name that is not a Symbol"""
    pass


class LispySyntaxError(LispyError):
    """ Raised when source text does not match the grammar"""

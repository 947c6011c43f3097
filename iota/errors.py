

class IotaError(Exception):
    """ Base class for all Iota errors"""
    pass

class IotaSyntaxError(IotaError):
    """ Raised when program text or a special form is malformed"""

class IotaUnexpectedEOF(IotaSyntaxError):
    """ Raised when a form is expected but no tokens remain"""

class IotaUnexpectedClose(IotaSyntaxError):
    """ Raised when a ')' appears where a new form is expected"""

class IotaInvalidSymbol(IotaSyntaxError):
    """ Raised when a non-symbol is used where a name is required, or a name is malformed"""

class IotaUnboundSymbol(IotaError):
    """ Raised when a symbol is used before it is bound"""

class IotaProcedureNotFound(IotaError):
    """ Raised when the head of a call names no special form, primitive or closure"""

class IotaTypeError(IotaError):
    """ Raised when the types of arguments passed to a procedure are incorrect"""

class IotaEmptyList(IotaTypeError):
    """ Raised when the first element of an empty list is requested"""

class IotaArityError(IotaError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

class IotaArithmeticError(IotaError):
    """ Raised when an arithmetic operation has no defined result"""

class IotaDivisionByZero(IotaArithmeticError):
    """ Raised when dividing by zero"""

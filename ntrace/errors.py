class DegenerateGeometryError(ZeroDivisionError):
    '''
    Raised when a geometric precondition is violated, e.g. normalizing a zero-length vector
    or building a sampling basis from a normal parallel to its reference axis.
    '''
    pass

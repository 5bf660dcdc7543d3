class ChunkTypeError(Exception):
    pass


class InvalidChunkType(ChunkTypeError):
    """
    A raw chunk type code contains a byte that is not an ASCII letter
    or digit.

    :ivar code: The rejected bytes
    """
    def __init__(self, message, code):
        super().__init__(message)
        self.code = code


class InvalidLength(ChunkTypeError):
    """
    :ivar length: The length that was given instead of 4
    """
    def __init__(self, message, length):
        super().__init__(message)
        self.length = length


class InvalidEncoding(ChunkTypeError):
    pass

class RandMapError(Exception):
    pass


class HandleRangeError(RandMapError, ValueError):
    pass


class HandleSpaceExhausted(RandMapError, RuntimeError):
    pass

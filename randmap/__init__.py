from randmap.errors import RandMapError, HandleRangeError, HandleSpaceExhausted
from randmap.handle import Handle, HandleGenerator, HANDLE_BITS, HANDLE_MAX
from randmap.map import RandMap

__all__ = [
    'RandMap',
    'Handle',
    'HandleGenerator',
    'HANDLE_BITS',
    'HANDLE_MAX',
    'RandMapError',
    'HandleRangeError',
    'HandleSpaceExhausted',
]

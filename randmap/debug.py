import functools
import logging

logger = logging.getLogger(__name__)

DEBUG_ENABLED = False
DEBUG_DEPTH = 0


# Call-tracing decorator. DEBUG_ENABLED is checked on every call, so tracing
# can be switched on after the decorated module has been imported.
def trace(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if not DEBUG_ENABLED:
            return func(*args, **kwargs)

        global DEBUG_DEPTH
        saved_depth = DEBUG_DEPTH
        prefix = '  ' * DEBUG_DEPTH
        logger.debug("%s%s(%s, %s) {", prefix, func.__qualname__, ', '.join(repr(x) for x in args), kwargs)
        DEBUG_DEPTH += 1
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.debug("%s} raise %r", prefix, e)
            raise
        else:
            logger.debug("%s  return %r", prefix, result)
            logger.debug("%s}", prefix)
            return result
        finally:
            DEBUG_DEPTH -= 1
            assert saved_depth == DEBUG_DEPTH
    return wrapper

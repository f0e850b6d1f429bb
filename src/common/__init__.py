from .exceptions import \
    OpenTrackIOConfigurationError, \
    OpenTrackIOError
from .util import \
    IOUtils

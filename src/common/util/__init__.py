from .io_utils import \
    IOUtils

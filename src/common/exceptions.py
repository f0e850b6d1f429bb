class OpenTrackIOError(Exception):
    def __init__(self, *args):
        super().__init__(*args)


class OpenTrackIOConfigurationError(OpenTrackIOError):
    message: str

    def __init__(self, message: str, *args):
        super().__init__(message, *args)
        self.message = message

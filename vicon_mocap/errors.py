class ViconError(Exception):
    """Base class for errors raised while talking to the Vicon DataStream server."""


class ViconConnectionError(ViconError):
    """The client could not connect to the Vicon DataStream server."""


class ViconFrameError(ViconError):
    """A field of the current frame could not be read."""

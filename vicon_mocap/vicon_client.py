from typing import List, Sequence, Tuple

import numpy as np

from vicon_mocap.errors import ViconConnectionError, ViconFrameError

STREAM_MODES = ("ServerPush", "ClientPull", "ClientPullPreFetch")
DIRECTIONS = ("Forward", "Backward", "Left", "Right", "Up", "Down")


class ViconClient:
    """
    A thin wrapper around the Vicon DataStream SDK client.
    It configures segment streaming on connect and turns SDK exceptions into ViconError subclasses.

    The SDK is imported on first use, so a client object with the same call surface (and its exception type)
    can be injected instead.
    """

    def __init__(
        self,
        host: str,
        logger,
        stream_mode: str = "ServerPush",
        axis_mapping: Sequence[str] = ("Forward", "Left", "Up"),
        client=None,
        sdk_error=None,
    ):
        if stream_mode not in STREAM_MODES:
            raise ValueError("Unknown stream mode '{}', expected one of {}".format(stream_mode, list(STREAM_MODES)))
        if len(axis_mapping) != 3 or any(d not in DIRECTIONS for d in axis_mapping):
            raise ValueError("Axis mapping must be three of {}, got {}".format(list(DIRECTIONS), list(axis_mapping)))

        self.host = host
        self.logger = logger
        self.stream_mode = stream_mode
        self.axis_mapping = tuple(axis_mapping)

        if client is None or sdk_error is None:
            from vicon_dssdk import ViconDataStream

            client = client if client is not None else ViconDataStream.Client()
            sdk_error = sdk_error if sdk_error is not None else ViconDataStream.DataStreamException
        self.client = client
        self.sdk_error = sdk_error

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()

    def connect(self):
        version = self.client.GetVersion()
        self.logger.info("Vicon DataStream SDK version: {}".format(".".join(str(v) for v in version)))

        try:
            self.client.Connect(self.host)
        except self.sdk_error as e:
            raise ViconConnectionError("System Failed to Connect to Vicon Server at {}: {}".format(self.host, e)) from e
        if not self.client.IsConnected():
            raise ViconConnectionError("System Failed to Connect to Vicon Server at {}".format(self.host))
        self.logger.info("System Successfully Connected to Vicon Server at {}".format(self.host))

        self.client.EnableSegmentData()
        if self.client.IsSegmentDataEnabled():
            self.logger.info("Segment Data is Enabled")
        else:
            self.logger.warning("Segment Data Not Enabled")

        self.client.SetStreamMode(getattr(self.client.StreamMode, "E" + self.stream_mode))
        self.client.SetAxisMapping(*(getattr(self.client.AxisMapping, "E" + d) for d in self.axis_mapping))
        self.logger.info("Stream mode {}, axis mapping {}".format(self.stream_mode, "/".join(self.axis_mapping)))

    def is_connected(self) -> bool:
        return bool(self.client.IsConnected())

    def disconnect(self):
        if self.is_connected():
            self.client.Disconnect()
            self.logger.info("Disconnected from Vicon Server")

    def get_frame(self) -> bool:
        """
        Request a new frame from the server. Returns False when no new frame is available.
        """
        try:
            return bool(self.client.GetFrame())
        except self.sdk_error as e:
            if self.client.IsConnected():
                self.logger.debug("GetFrame failed: {}".format(e))
            else:
                self.logger.warning("Lost connection to Vicon Server at {}: {}".format(self.host, e))
            return False

    ### FRAME FIELDS ###
    def get_frame_number(self) -> int:
        return int(self._read(self.client.GetFrameNumber))

    def get_frame_rate(self) -> float:
        return float(self._read(self.client.GetFrameRate))

    def get_subject_names(self) -> List[str]:
        return list(self._read(self.client.GetSubjectNames))

    def get_segment_names(self, subject_name: str) -> List[str]:
        return list(self._read(self.client.GetSegmentNames, subject_name))

    def get_segment_pose(self, subject_name: str, segment_name: str) -> Tuple[np.ndarray, np.ndarray, bool]:
        """
        Return the global translation (mm), global rotation quaternion (x, y, z, w) and occlusion flag of a segment.
        """
        translation, trans_occluded = self._read(self.client.GetSegmentGlobalTranslation, subject_name, segment_name)
        rotation, rot_occluded = self._read(self.client.GetSegmentGlobalRotationQuaternion, subject_name, segment_name)
        return np.array(translation, dtype=float), np.array(rotation, dtype=float), bool(trans_occluded or rot_occluded)

    def get_object_quality(self, subject_name: str) -> float:
        # RMS error of the rigid body compared to its model
        return float(self._read(self.client.GetObjectQuality, subject_name))

    def _read(self, getter, *args):
        try:
            return getter(*args)
        except self.sdk_error as e:
            raise ViconFrameError("{}{} failed: {}".format(getter.__name__, args, e)) from e

import numpy as np
import pytest

from vicon_mocap.errors import ViconConnectionError, ViconFrameError


class RecordingLogger:
    def __init__(self):
        self.messages = []

    def _log(self, level, msg):
        self.messages.append((level, msg))

    def debug(self, msg):
        self._log("debug", msg)

    def info(self, msg):
        self._log("info", msg)

    def warning(self, msg):
        self._log("warning", msg)

    def error(self, msg):
        self._log("error", msg)

    def at(self, level):
        return [m for lvl, m in self.messages if lvl == level]


class FakeViconClient:
    """Stands in for ViconClient, with scripted frames."""

    def __init__(self, frames=(True,), connect_error=None):
        self.frames = list(frames)
        self.connect_error = connect_error
        self.connected = False
        self.disconnects = 0
        self.frame_number = 100
        self.subjects = {"Drone": ["Drone"], "Wand": ["Wand"]}
        self.translation = np.array([1000.0, -2500.0, 300.0])
        self.rotation = np.array([0.0, 0.0, 0.0, 1.0])
        self.occluded = False
        self.quality = 0.25
        self.read_error = None

    def connect(self):
        if self.connect_error is not None:
            raise self.connect_error
        self.connected = True

    def disconnect(self):
        self.disconnects += 1
        self.connected = False

    def get_frame(self):
        ok = self.frames.pop(0) if self.frames else True
        if ok:
            self.frame_number += 1
        return ok

    def get_frame_number(self):
        return self.frame_number

    def get_frame_rate(self):
        return 100.0

    def get_subject_names(self):
        if self.read_error is not None:
            raise self.read_error
        return list(self.subjects)

    def get_segment_names(self, subject_name):
        return list(self.subjects[subject_name])

    def get_segment_pose(self, subject_name, segment_name):
        return self.translation, self.rotation, self.occluded

    def get_object_quality(self, subject_name):
        return self.quality


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def fake_client():
    return FakeViconClient()


@pytest.fixture
def failing_client():
    return FakeViconClient(connect_error=ViconConnectionError("System Failed to Connect to Vicon Server at 192.168.1.2:801"))


@pytest.fixture
def frame_error():
    return ViconFrameError("GetSubjectNames() failed: NotConnected")


@pytest.fixture
def make_client():
    return FakeViconClient

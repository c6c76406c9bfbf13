import time
from typing import Callable, Optional

from vicon_mocap.errors import ViconConnectionError, ViconFrameError
from vicon_mocap.records import MocapSample, PoseRecord, QualityRecord
from vicon_mocap.utils import mm_to_m, normalize_quaternion


class MocapBridge:
    """
    Polls the Vicon client one frame at a time and hands a pose record and a quality record to the publish callbacks.
    The tracked subject and segment default to the first ones the server reports.
    """

    def __init__(
        self,
        client,
        publish_pose: Callable[[PoseRecord], None],
        publish_quality: Callable[[QualityRecord], None],
        logger,
        subject_name: str = "",
        segment_name: str = "",
        now: Callable = time.time,
    ):
        self.client = client
        self.publish_pose = publish_pose
        self.publish_quality = publish_quality
        self.logger = logger
        self.subject_name = subject_name
        self.segment_name = segment_name
        self.now = now

    def connect(self) -> bool:
        try:
            self.client.connect()
        except ViconConnectionError as e:
            self.logger.error(str(e))
            return False
        return True

    def read_sample(self) -> MocapSample:
        """
        Read the fields of the current frame for the tracked subject and segment.
        """
        frame_number = self.client.get_frame_number()
        frame_rate = self.client.get_frame_rate()

        subjects = self.client.get_subject_names()
        self.logger.debug(f"Frame Number: {frame_number}, Frame Rate: {frame_rate}, Number of subjects: {len(subjects)}")
        subject_name = self._select(self.subject_name, subjects, "subject")

        segments = self.client.get_segment_names(subject_name)
        segment_name = self._select(self.segment_name, segments, f"segment of subject '{subject_name}'")

        translation, rotation, occluded = self.client.get_segment_pose(subject_name, segment_name)
        quality = self.client.get_object_quality(subject_name)
        return MocapSample(frame_number, frame_rate, subject_name, segment_name, translation, rotation, occluded, quality)

    def step(self) -> bool:
        """
        Fetch one frame and publish it. Returns False if nothing was published.
        """
        if not self.client.get_frame():
            self.logger.warning("Did not get a new frame!")
            return False

        try:
            sample = self.read_sample()
        except ViconFrameError as e:
            self.logger.warning(f"Skipping frame: {e}")
            return False

        stamp = self.now()
        pose = self.to_pose_record(sample, stamp)
        quality = self.to_quality_record(sample, stamp)
        self._log_frame(pose, quality)

        self.publish_pose(pose)
        self.publish_quality(quality)
        return True

    def run(self, ok: Callable[[], bool], spin_once: Optional[Callable[[], None]] = None) -> bool:
        """
        Connect, then step until ok() returns False. Returns False if the connection failed.
        """
        if not self.connect():
            return False
        while ok():
            self.step()
            if spin_once is not None:
                spin_once()
        return True

    @staticmethod
    def to_pose_record(sample: MocapSample, stamp) -> PoseRecord:
        return PoseRecord(
            frame_number=sample.frame_number,
            frame_id=sample.segment_name,
            subject_name=sample.subject_name,
            position=mm_to_m(sample.translation),
            orientation=normalize_quaternion(sample.rotation),
            stamp=stamp,
        )

    @staticmethod
    def to_quality_record(sample: MocapSample, stamp) -> QualityRecord:
        return QualityRecord(
            frame_number=sample.frame_number,
            frame_id=sample.segment_name,
            subject_name=sample.subject_name,
            quality_score=sample.quality,
            frame_rate=sample.frame_rate,
            occluded=sample.occluded,
            stamp=stamp,
        )

    def _select(self, configured: str, available: list, what: str) -> str:
        if configured:
            if configured not in available:
                raise ViconFrameError(f"No {what} named '{configured}' in frame (have {available})")
            return configured
        if not available:
            raise ViconFrameError(f"No {what} in frame")
        return available[0]

    def _log_frame(self, pose: PoseRecord, quality: QualityRecord):
        self.logger.debug(f"Object Name: {pose.frame_id}, Position (m): {pose.position}, Orientation (x,y,z,w): {pose.orientation}")
        self.logger.debug(f"Quality Score: {quality.quality_score}")
        if quality.occluded:
            self.logger.warning(f"Segment '{pose.frame_id}' occluded in frame {pose.frame_number}")

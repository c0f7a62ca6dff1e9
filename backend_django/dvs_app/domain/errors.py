"""Domain failures.

Every detection and measurement step is deterministic for a fixed input, so
none of these are retried. A failed entity is reported as "cannot be measured".
"""

from __future__ import annotations


class DetectionError(Exception):
    """Base class for failures of the landmark pipeline."""


class ConstructionError(DetectionError):
    """The photo (or a detector model) could not be loaded."""


class InsufficientDetections(DetectionError):
    """Fewer than two eye candidates were found."""


class NoSuitableCandidate(DetectionError):
    """No contour inside the pupil fell into the accepted area band."""


class PupilNotFound(DetectionError):
    """No pupil circle could be located inside an eye."""


class InvariantViolation(DetectionError):
    """A geometry or state guard was tripped."""


class AccumulatorClosed(InvariantViolation):
    """A pupil sample was appended after the distance was already final."""

"""
Rotation sequences supported by the roll-pitch-yaw extraction.

zyx (vehicle): R = Rz(a3) Ry(a2) Rx(a1), the default
xyz (arm): R = Rx(a3) Ry(a2) Rz(a1)
yxz (camera): R = Ry(a3) Rx(a2) Rz(a1)

In every sequence the middle angle a2 is restricted to [-pi/2, pi/2] and
is singular at +/- pi/2.
"""
import enum


class InvalidArgument(ValueError):
    """Raised when a matrix, sequence or option value is not acceptable"""


class RotationSequence(enum.Enum):
    ZYX = "zyx"
    XYZ = "xyz"
    YXZ = "yxz"


aliases = {
    "zyx": RotationSequence.ZYX,
    "vehicle": RotationSequence.ZYX,
    "xyz": RotationSequence.XYZ,
    "arm": RotationSequence.XYZ,
    "yxz": RotationSequence.YXZ,
    "camera": RotationSequence.YXZ,
}

default = RotationSequence.ZYX


def resolve(sequence=None) -> RotationSequence:
    """
    Resolve a sequence name or alias to its canonical RotationSequence.
    :param sequence: RotationSequence, name or alias (case insensitive), or None for the default
    :return: The canonical RotationSequence
    """
    if sequence is None:
        return default
    if isinstance(sequence, RotationSequence):
        return sequence
    if isinstance(sequence, str) and sequence.lower() in aliases:
        return aliases[sequence.lower()]
    raise InvalidArgument(
        "unknown rotation sequence {!r}, valid: {:s}".format(
            sequence, ", ".join(aliases.keys())
        )
    )

"""
Roll-pitch-yaw angles from rotation matrices and homogeneous transforms.

rpy: symbolic decomposition, 3 parameters, singularity at a2 = +/- pi/2
transform: numeric extraction for single matrices, batches and 3x3xK stacks
check: shape and validity tests for rotation matrices and transforms
"""
from .check import is_homog, is_rot
from .rpy import dcm_from_rpy, rpy_from_dcm
from .sequence import InvalidArgument, RotationSequence
from .transform import (
    dcm_to_rpy,
    dcm_to_rpy_batch,
    rotation_to_rpy,
    rpy_to_dcm,
    rpy_to_tr,
)

__version__ = "0.1.0"

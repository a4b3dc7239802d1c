"""
Shape and validity checks for rotation matrices and homogeneous transforms.
"""
import numpy as np

from .util import tol as default_tol


def is_rot(R, check=False, tol=default_tol) -> bool:
    """
    Test for a rotation matrix.
    :param R: The candidate matrix
    :param check: Also require orthonormal columns and determinant +1
    :param tol: Tolerance for the orthonormality and determinant tests
    :return: True if R is a 3x3 (valid, when check is set) rotation matrix
    """
    R = np.asarray(R)
    if R.shape != (3, 3):
        return False
    if not check:
        return True
    R = R.astype(float)
    return bool(
        np.linalg.norm(R.T @ R - np.eye(3)) < tol
        and abs(np.linalg.det(R) - 1) < tol
    )


def is_homog(T, check=False, tol=default_tol) -> bool:
    """
    Test for a homogeneous transform.
    :param T: The candidate matrix
    :param check: Also require a valid rotation block and a [0, 0, 0, 1] bottom row
    :param tol: Tolerance for the rotation block and bottom row tests
    :return: True if T is a 4x4 (valid, when check is set) homogeneous transform
    """
    T = np.asarray(T)
    if T.shape != (4, 4):
        return False
    if not check:
        return True
    T = T.astype(float)
    return bool(
        is_rot(T[:3, :3], check=True, tol=tol)
        and np.linalg.norm(T[3, :] - [0, 0, 0, 1]) < tol
    )

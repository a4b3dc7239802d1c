#!/usr/bin/env python
"""Roll-pitch-yaw angles from rotation matrices

This is a library for extracting roll-pitch-yaw Euler angles from rotation
matrices and homogeneous transforms, for the zyx (vehicle), xyz (arm) and
yxz (camera) rotation sequences. It employs the Casadi framework so the
decomposition is available both numerically and symbolically.
"""

from setuptools import setup, find_packages
import sys

if sys.version_info < (3, 6):
    raise SystemExit("requires  Python >= 3.6")

DOCLINES = __doc__.split("\n")

CLASSIFIERS = """\
Development Status :: 3 - Alpha
Intended Audience :: Science/Research
Intended Audience :: Developers
License :: OSI Approved :: BSD License
Programming Language :: Python
Programming Language :: Python :: 3
Topic :: Software Development
Topic :: Scientific/Engineering :: Mathematics
Topic :: Scientific/Engineering :: Physics
Operating System :: Microsoft :: Windows
Operating System :: POSIX
Operating System :: Unix
Operating System :: MacOS
"""

# pylint: disable=invalid-name

package_name = "pyrpy"

setup(
    name=package_name,
    description=DOCLINES[0],
    long_description="\n".join(DOCLINES[2:]),
    license="BSD 3-Clause",
    classifiers=[_f for _f in CLASSIFIERS.split("\n") if _f],
    platforms=["Windows", "Linux", "Solaris", "Mac OS-X", "Unix"],
    install_requires=[
        "numpy",
        "casadi",
    ],
    extras_require={
        "test": ["pytest", "scipy"],
    },
    packages=find_packages(include=[package_name, package_name + ".*"]),
    version="0.1.0",
    zip_safe=True,
)

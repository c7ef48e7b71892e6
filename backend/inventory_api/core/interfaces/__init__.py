# Interfaces package initialization
# This file makes the interfaces directory a Python package

from . import repository_interface
from . import service_interface

__all__ = [
    "repository_interface",
    "service_interface",
]

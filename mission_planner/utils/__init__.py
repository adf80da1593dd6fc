"""Constants, vectors and angle utilities."""

from .constants import *
from .math_utils import *
from .vector import *

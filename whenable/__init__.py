""" whenable: push-based streams with a single terminal event """
from .api import *  # noqa: F401,F403

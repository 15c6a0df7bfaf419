# flake8: noqa: F401

from .core import Stream, Subscriber, Errored, OPEN, COMPLETED
from .producer import of, from_iterable, fail, empty, never
from .timely import scheduled, to_future

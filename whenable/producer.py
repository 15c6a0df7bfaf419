from typing import TypeVar, Iterable, Any
from .core import Stream

T = TypeVar('T')


def of(*values: T) -> Stream[T]:
    """ stream of the given values, completed right away

    >>> _ = of(1, 2, 3).when(print, None, lambda: print('complete'))
    1
    2
    3
    complete

    Parameters
    ----------
    *values : T
        values to emit, in order

    Returns
    -------
    Stream[T]
    """
    return from_iterable(values)


def from_iterable(it: Iterable[T]) -> Stream[T]:
    """ emit every item of an iterable then complete, an exception raised
    while iterating ends the stream with that error

    >>> def items():
    ...     yield 'a'
    ...     raise KeyError('b')
    >>> _ = from_iterable(items()).when(print, print)
    a
    'b'

    Parameters
    ----------
    it : Iterable[T]
        items to emit, consumed synchronously

    Returns
    -------
    Stream[T]
    """

    def produce(value, error, complete):
        for item in it:
            value(item)
        complete()

    return Stream(produce)


def fail(error: Exception) -> Stream[Any]:
    """ stream ended by the given error without any value

    >>> _ = fail(ValueError('boom')).when(print, print)
    boom
    """

    def produce(value, emit_error, complete):
        emit_error(error)

    return Stream(produce)


def empty() -> Stream[Any]:
    """ stream completed without any value """
    return Stream(lambda value, error, complete: complete())


def never() -> Stream[Any]:
    """ stream which never emits nor terminates """
    return Stream()

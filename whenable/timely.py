import asyncio
import logging
from typing import TypeVar, Iterable, List
from .core import Stream

T = TypeVar('T')

logger = logging.getLogger(__name__)


def scheduled(it: Iterable[T],
              loop: asyncio.AbstractEventLoop = None,
              interval: float = 0) -> Stream[T]:
    """ emit the items of an iterable one per event loop callback,
    completing after the last one

    Nothing is emitted synchronously, so subscribers attached right after
    creation see every item live.

    >>> loop = asyncio.new_event_loop()
    >>> s = scheduled('ab', loop)
    >>> s.values
    []
    >>> loop.run_until_complete(to_future(s, loop))
    ['a', 'b']
    >>> loop.close()

    Parameters
    ----------
    it : Iterable[T]
        items to emit
    loop : asyncio.AbstractEventLoop, optional
        event loop to schedule on, defaults to the running loop
    interval : float, optional
        seconds between two emissions, 0 to emit on the next loop iteration

    Returns
    -------
    Stream[T]
    """
    loop = loop or asyncio.get_running_loop()
    items = iter(it)

    def produce(value, error, complete):
        def step():
            try:
                item = next(items)
            except StopIteration:
                logger.debug('scheduled items exhausted')
                complete()
                return
            except Exception as e:
                error(e)
                return
            value(item)
            schedule()

        def schedule():
            if interval > 0:
                loop.call_later(interval, step)
            else:
                loop.call_soon(step)

        schedule()

    return Stream(produce)


def to_future(s: Stream[T],
              loop: asyncio.AbstractEventLoop = None) -> asyncio.Future:
    """ future of the values a stream delivers, resolved on completion
    or failed with the stream error

    A stream which is already terminated resolves the future right away
    with its whole history.

    Parameters
    ----------
    s : Stream[T]
        source stream
    loop : asyncio.AbstractEventLoop, optional
        event loop owning the future, defaults to the running loop

    Returns
    -------
    asyncio.Future
        resolved with a list of the values
    """
    loop = loop or asyncio.get_running_loop()
    fut = loop.create_future()
    values: List[T] = []

    def on_error(error):
        if not fut.done():
            fut.set_exception(error)

    def on_complete():
        if not fut.done():
            fut.set_result(values)

    s.when(values.append, on_error, on_complete)
    return fut

from typing import TypeVar, Generic, List, Callable, NamedTuple, Optional, \
    Union, Any
import logging

T = TypeVar('T')
S = TypeVar('S')

logger = logging.getLogger(__name__)


class _Status:
    ''' a payload-free status of a stream '''

    def __init__(self, name: str):
        self.name = name

    def __repr__(self):
        return self.name


OPEN = _Status('Open')
COMPLETED = _Status('Completed')


class Errored(NamedTuple):
    """ terminal status carrying the error the stream ended with """
    error: Exception


Status = Union[_Status, Errored]


class Subscriber(NamedTuple):
    on_value: Callable[[Any], None]
    on_error: Callable[[Exception], None]
    on_complete: Callable[[], None]


Producer = Callable[
    [Callable[[T], None], Callable[[Exception], None], Callable[[], None]],
    None]


class Stream(Generic[T]):
    """ Stream: a push-based stream of values ended by exactly one terminal
    event, either a completion or an error

    Values are pushed by the producer given at construction, which receives
    three emit functions: value, error and complete. Consumers attach with
    `when`, which also derives a new stream from the mapped values.

    >>> # late subscribers get the whole history replayed
    >>> from whenable.api import Stream
    >>> s = Stream(lambda value, error, complete: (
    ...     value(1), value(2), complete()))
    >>> _ = s.when(print, print, lambda: print('done'))
    1
    2
    done
    >>> s
    <Stream Completed values=2>

    >>> # subscribers of an open stream only see live events
    >>> emit = []
    >>> s = Stream(lambda value, error, complete: emit.extend([value, complete]))
    >>> value, complete = emit
    >>> value('early')
    >>> _ = s.when(print)
    >>> value('live')
    live
    >>> complete()
    >>> s.values
    ['early', 'live']
    """

    def __init__(self, producer: Optional[Producer] = None):
        self._buffer: List[T] = []
        self._status: Status = OPEN
        self._subscribers: List[Subscriber] = []
        if producer is not None:
            try:
                producer(self._emit_value, self._emit_error,
                         self._emit_complete)
            except Exception as e:
                self._emit_error(e)

    def __repr__(self):
        return '<Stream %r values=%d>' % (self._status, len(self._buffer))

    @property
    def status(self) -> Status:
        return self._status

    @property
    def values(self) -> List[T]:
        """ copy of every value accepted so far """
        return list(self._buffer)

    @property
    def done(self) -> bool:
        return self._status is not OPEN

    def _emit_value(self, value: T) -> None:
        if self._status is not OPEN:
            logger.debug('%r: ignored value %r after termination', self, value)
            return
        self._buffer.append(value)
        for sub in list(self._subscribers):
            # a handler may have terminated this stream re-entrantly
            if self._status is not OPEN:
                break
            sub.on_value(value)

    def _emit_error(self, error: Exception) -> None:
        if self._status is not OPEN:
            logger.debug('%r: ignored error %r after termination', self, error)
            return
        for sub in self._terminate(Errored(error)):
            sub.on_error(error)

    def _emit_complete(self) -> None:
        if self._status is not OPEN:
            logger.debug('%r: ignored completion after termination', self)
            return
        for sub in self._terminate(COMPLETED):
            sub.on_complete()

    def _terminate(self, status: Status) -> List[Subscriber]:
        """ switch to a terminal status and detach every subscriber,
        returning them in registration order for the final delivery """
        subscribers, self._subscribers = self._subscribers, []
        self._status = status
        logger.debug('%r: terminated, notifying %d subscriber(s)',
                     self, len(subscribers))
        return subscribers

    def _replay(self, sub: Subscriber) -> None:
        for value in self._buffer:
            sub.on_value(value)
        if isinstance(self._status, Errored):
            sub.on_error(self._status.error)
        else:
            sub.on_complete()

    def when(self,
             on_value: Callable[[T], S],
             on_error: Optional[Callable[[Exception], None]] = None,
             on_complete: Optional[Callable[[], None]] = None) -> 'Stream[S]':
        """ subscribe to the stream and derive a new one from it

        If the stream has already terminated, every buffered value and then
        the terminal event are delivered synchronously before returning.
        Otherwise only events emitted from now on are delivered.

        Exceptions raised by the handlers are not caught: they propagate out
        of the call which triggered the delivery.

        >>> from whenable.api import of
        >>> s = of(1).when(lambda v: -v).when(str)
        >>> s.values
        ['-1']

        Parameters
        ----------
        on_value : Callable[[T], S]
            maps every value, the result is pushed to the derived stream
        on_error : Callable[[Exception], None], optional
            called with the error before it is forwarded
        on_complete : Callable[[], None], optional
            called before the completion is forwarded

        Returns
        -------
        Stream[S]
            stream of the mapped values, ending the same way as this one
        """
        res: Stream[S] = Stream()

        def notify_value(value):
            res._emit_value(on_value(value))

        def notify_error(error):
            if on_error is not None:
                on_error(error)
            res._emit_error(error)

        def notify_complete():
            if on_complete is not None:
                on_complete()
            res._emit_complete()

        sub = Subscriber(notify_value, notify_error, notify_complete)
        if self._status is OPEN:
            self._subscribers.append(sub)
        else:
            self._replay(sub)
        return res

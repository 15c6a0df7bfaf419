import asyncio

import pytest

from helper import record
from whenable.api import Stream, COMPLETED, Errored, of, from_iterable, \
    fail, empty, never, scheduled, to_future


@pytest.fixture
def loop():
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


def test_of():
    r = record(of(1, 2, 3))
    assert r.footprint == [('value', 1), ('value', 2), ('value', 3),
                           ('complete', )]


def test_of_nothing():
    assert of().status is COMPLETED


def test_from_iterable_error():
    expected = KeyError('missing')

    def items():
        yield 1
        yield 2
        raise expected

    s = from_iterable(items())
    r = record(s)
    assert r.footprint == [('value', 1), ('value', 2), ('error', expected)]
    assert s.status == Errored(expected)


def test_fail():
    expected = ValueError('boom')
    r = record(fail(expected).when(lambda v: v + 1))
    assert r.footprint == [('error', expected)]


def test_empty():
    r = record(empty())
    assert r.footprint == [('complete', )]


def test_never():
    s = never()
    r = record(s)
    assert r.footprint == []
    assert not s.done


def test_scheduled_emits_on_loop(loop):
    s = scheduled([1, 2, 3], loop)
    r = record(s)
    assert r.footprint == []
    assert loop.run_until_complete(to_future(s, loop)) == [1, 2, 3]
    assert r.footprint == [('value', 1), ('value', 2), ('value', 3),
                           ('complete', )]


def test_scheduled_interval(loop):
    s = scheduled(range(3), loop, interval=0.01)
    assert loop.run_until_complete(to_future(s, loop)) == [0, 1, 2]


def test_scheduled_error(loop):
    expected = ValueError('expected')

    def items():
        yield 'a'
        raise expected

    s = scheduled(items(), loop)
    r = record(s)
    with pytest.raises(ValueError) as info:
        loop.run_until_complete(to_future(s, loop))
    assert info.value is expected
    assert r.footprint == [('value', 'a'), ('error', expected)]


def test_scheduled_running_loop(loop):
    async def main():
        return await to_future(scheduled('xyz').when(str.upper))

    assert loop.run_until_complete(main()) == ['X', 'Y', 'Z']


def test_to_future_replays_terminated(loop):
    s = of('a', 'b')
    fut = to_future(s, loop)
    assert fut.done()
    assert fut.result() == ['a', 'b']


def test_to_future_only_live_values(loop):
    emit = []
    s = Stream(lambda value, error, complete: emit.extend([value, complete]))
    value, complete = emit
    value('early')
    fut = to_future(s, loop)
    value('live')
    complete()
    assert loop.run_until_complete(fut) == ['live']

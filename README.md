# readypoll

Building blocks for readiness-based, non-blocking I/O: interest sets,
readiness events, a bounded event container, the event-source interface, and
an adapter that tracks which registry an I/O object belongs to.

## Installation

```
pip install readypoll
```

## Interests

`readypoll.interest.Interest` is a non-empty set of readiness kinds:
`Interest.READABLE`, `Interest.WRITABLE`, `Interest.AIO` and `Interest.LIO`.

```python
from readypoll.interest import Interest

rw = Interest.READABLE | Interest.WRITABLE      # same as Interest.READABLE.add(Interest.WRITABLE)
assert rw.is_readable() and rw.is_writable()
print(repr(rw))                                  # READABLE | WRITABLE

w = rw.remove(Interest.READABLE)                 # WRITABLE
assert w.remove(Interest.WRITABLE) is None       # a set is never empty
```

Building an `Interest` from `0` or from unknown bits raises `ValueError`.
Interests are immutable, hashable and ordered by their bits.

## Events

`readypoll.event.Event` pairs a token with readiness flags, set by keyword:

```python
from readypoll.event import Event

event = Event(3, readable=True, read_closed=True)
assert event.token == 3
assert event.is_readable() and event.is_read_closed()
assert not event.is_writable()
```

The flags are `readable`, `writable`, `error`, `read_closed`, `write_closed`,
`priority`, `aio` and `lio`, each with a matching `is_*()` method.

`readypoll.events.Events` holds at most `capacity` events. `fill()` replaces
the contents, keeps only the first `capacity` events and returns how many it
stored; `clear()` empties it.

```python
from readypoll.event import Event
from readypoll.events import Events

events = Events(2)
assert events.capacity() == 2 and events.is_empty()

stored = events.fill([Event(0, writable=True), Event(1, readable=True), Event(2)])
assert stored == 2 and len(events) == 2

for event in events:
    print(event.token, event.is_readable())

events.clear()
assert events.is_empty()
```

A negative capacity raises `ValueError`; filling with anything other than
`Event` objects raises `TypeError`.

## Event sources

`readypoll.source.Source` is an abstract base class. Anything that can be
registered implements `register(registry, token, interests)`,
`reregister(registry, token, interests)` and `deregister(registry)`, usually
by delegating to a wrapped handle, and reports failures by raising `OSError`.

`readypoll.io_source.IoSource` wraps an arbitrary I/O object. `do_io(f)`
calls `f` with the wrapped object and returns its result, `into_inner()`
returns the wrapped object, and other attributes are forwarded to it.

```python
import io
from readypoll.io_source import IoSource

source = IoSource(io.BytesIO(b"hello"))
assert source.do_io(lambda f: f.read()) == b"hello"
```

Each `IoSource` carries a `selector_id` (`readypoll.io_source.SelectorId`)
recording which registry id it is associated with (`0` meaning none):

- `associate(registry_id)` raises `FileExistsError` if it was already
  associated;
- `check_association(registry_id)` raises `FileNotFoundError` if it is not
  associated, or `FileExistsError` if it is associated with a different id;
- `remove_association(registry_id)` raises `FileNotFoundError` unless it was
  associated with that id.

## What this package does not do

It has no poller or registry that waits on the operating system for
readiness, no waker, and no socket, listener or pipe types. `Events` is
filled by whatever code performs the polling, and `IoSource` does not itself
implement `Source`; it only keeps the registration bookkeeping.

## Running the tests

```
pip install -e .[test]
pytest
```
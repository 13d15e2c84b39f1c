import pytest

from readypoll.interest import Interest
from readypoll.source import Source


class RecordingSource(Source):
    def __init__(self):
        self.registrations = []
        self.reregistrations = []
        self.deregister_count = 0

    def register(self, registry, token, interests):
        self.registrations.append((token, interests))

    def reregister(self, registry, token, interests):
        self.reregistrations.append((token, interests))

    def deregister(self, registry):
        self.deregister_count += 1


class ErroneousSource(Source):
    def register(self, registry, token, interests):
        raise OSError("register")

    def reregister(self, registry, token, interests):
        raise OSError("reregister")

    def deregister(self, registry):
        raise OSError("deregister")


def test_registration_flow():
    source = RecordingSource()
    registry = object()
    interests = Interest(0b0001)
    re_interests = Interest.READABLE.add(Interest.WRITABLE)

    source.register(registry, 0, interests)
    assert source.registrations == [(0, Interest.READABLE)]
    assert source.reregistrations == []
    assert source.deregister_count == 0

    source.reregister(registry, 0, re_interests)
    assert len(source.registrations) == 1
    assert source.reregistrations == [(0, Interest.READABLE | Interest.WRITABLE)]
    assert source.deregister_count == 0

    source.deregister(registry)
    assert len(source.registrations) == 1
    assert len(source.reregistrations) == 1
    assert source.deregister_count == 1


def test_erroneous_registration():
    source = ErroneousSource()
    interests = Interest(0b0001)
    assert interests.is_readable()
    with pytest.raises(OSError, match="register"):
        source.register(None, 0, interests)
    with pytest.raises(OSError, match="reregister"):
        source.reregister(None, 0, interests)
    with pytest.raises(OSError, match="deregister"):
        source.deregister(None)


def test_source_and_incomplete_subclass_are_abstract():
    class OnlyRegister(Source):
        def register(self, registry, token, interests):
            pass

    with pytest.raises(TypeError):
        Source()
    with pytest.raises(TypeError):
        OnlyRegister()
    assert sorted(OnlyRegister.__abstractmethods__) == ["deregister", "reregister"]
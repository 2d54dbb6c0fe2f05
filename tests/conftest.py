import threading

import pytest

import uprotocol
from uprotocol import Status, StatusCode


class LoopbackTransport(uprotocol.Transport):
    """ In-process transport: send() hands the message straight to every
        listener registered for the topic.
    """

    def __init__(self, identity):
        self.identity = identity
        self.sent = list()
        self._listeners = dict()
        self._lock = threading.Lock()

    def authenticate(self, entity):
        if entity.name == self.identity.name:
            return Status.ok()
        return Status.failed('entity mismatch', StatusCode.UNAUTHENTICATED)

    def send(self, topic, payload, attributes):
        if attributes.is_expired():
            return Status.failed('expired', StatusCode.DEADLINE_EXCEEDED)

        with self._lock:
            self.sent.append((topic, payload, attributes))
            listeners = list(self._listeners.get(topic, ()))

        for listener in listeners:
            listener.on_receive(topic, payload, attributes)

        return Status.ok(str(attributes.id))

    def register_listener(self, topic, listener):
        with self._lock:
            self._listeners.setdefault(topic, list()).append(listener)
        return Status.ok()

    def unregister_listener(self, topic, listener):
        with self._lock:
            listeners = self._listeners.get(topic, list())
            if listener in listeners:
                listeners.remove(listener)
        return Status.ok()


class RecordingListener:

    def __init__(self):
        self.received = list()

    def on_receive(self, topic, payload, attributes):
        self.received.append((topic, payload, attributes))
        return Status.ok()


@pytest.fixture
def entity():
    return uprotocol.Entity('body.access', version=1)


@pytest.fixture
def sink(entity):
    return uprotocol.Uri(entity, resource='door.front_left')


@pytest.fixture
def transport(entity):
    return LoopbackTransport(entity)


@pytest.fixture
def listener():
    return RecordingListener()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:

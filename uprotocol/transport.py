from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Protocol as TypingProtocol

from .message import Attributes, Entity, Payload, Uri
from .status import Status


class Listener(TypingProtocol):
    """
    Callback for messages arriving on a topic. Transports call on_receive from
    their own threads, possibly concurrently with other listeners, so any
    shared state touched here needs its own locking.
    """
    def on_receive(self, topic: Uri, payload: Payload, attributes: Attributes) -> Status: ...


class Transport(ABC):
    """
    Common API for sending and receiving messages over some underlying
    technology. Every operation reports its outcome as a Status rather than
    raising.

    Conceptually a transport goes Disconnected -> Authenticated ->
    {Sending, Listening}*, but how and when it moves between those states is
    up to the implementation.
    """

    @abstractmethod
    def authenticate(self, entity: Entity) -> Status:
        """
        Check that the calling entity matches the transport's own identity.
        Returns Status.ok() on success and Status.failed(...) on a mismatch;
        a mismatch is an expected outcome and must not raise.
        """
        raise NotImplementedError

    @abstractmethod
    def send(self, topic: Uri, payload: Payload, attributes: Attributes) -> Status:
        """
        Make one delivery attempt of payload to topic, described by attributes
        (normally from AttributesBuilder). Returns ok once the underlying
        technology acknowledged it, which may be before end-to-end delivery.
        Retries, if any, are the implementation's business.
        """
        raise NotImplementedError

    @abstractmethod
    def register_listener(self, topic: Uri, listener: Listener) -> Status:
        """
        Have listener called for every message arriving on topic. Several
        listeners may be registered for the same topic.
        """
        raise NotImplementedError

    @abstractmethod
    def unregister_listener(self, topic: Uri, listener: Listener) -> Status:
        """
        Stop calling listener for topic. Removing a listener that is not
        registered still returns ok.
        """
        raise NotImplementedError

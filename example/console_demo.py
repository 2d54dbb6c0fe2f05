import logging

from uprotocol import (
    AttributesBuilder,
    CallOptions,
    Entity,
    Payload,
    Priority,
    Status,
    StatusCode,
    Transport,
    Uri,
)

log = logging.getLogger("console_demo")


class ConsoleTransport(Transport):
    """Prints what it is asked to send; listeners are called inline."""

    def __init__(self, identity: Entity):
        self.identity = identity
        self.listeners = {}

    def authenticate(self, entity):
        if entity != self.identity:
            return Status.failed(f"{entity.name} is not {self.identity.name}", StatusCode.UNAUTHENTICATED)
        return Status.ok()

    def send(self, topic, payload, attributes):
        log.info("send %s kind=%s prio=%s ttl=%s sink=%s", topic, attributes.kind,
                 attributes.priority.name, attributes.ttl, attributes.sink)
        for listener in self.listeners.get(topic, []):
            listener.on_receive(topic, payload, attributes)
        return Status.ok(str(attributes.id))

    def register_listener(self, topic, listener):
        self.listeners.setdefault(topic, []).append(listener)
        return Status.ok()

    def unregister_listener(self, topic, listener):
        if listener in self.listeners.get(topic, []):
            self.listeners[topic].remove(listener)
        return Status.ok()


class Printer:
    def on_receive(self, topic, payload, attributes):
        log.info("received on %s: %r (%s)", topic, payload.data, attributes.kind)
        return Status.ok()


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")

    me = Entity("body.access", version=1)
    t = ConsoleTransport(me)
    log.info("authenticate: %s", t.authenticate(me))
    log.info("authenticate stranger: %s", t.authenticate(Entity("hvac")))

    topic = Uri(me, "door.front_left#Door")
    printer = Printer()
    t.register_listener(topic, printer)

    # Publish
    attrs = AttributesBuilder.publish(Priority.CS1).build()
    log.info("%s", t.send(topic, Payload(b"open", "raw"), attrs))

    # Request / response pair
    method = Uri(Entity("hvac", version=1), "rpc.SetTemperature")
    options = CallOptions.new_builder().with_timeout(500).with_token("  tap-token ").build()
    req = (AttributesBuilder.request(Priority.CS4, method, options.timeout)
           .with_token(options.token)
           .build())
    log.info("%s", t.send(method, Payload(b"21.5", "raw"), req))

    resp = AttributesBuilder.response(Priority.CS4, topic, req.id).build()
    log.info("%s", t.send(topic, Payload(b"done", "raw"), resp))

    t.unregister_listener(topic, printer)

if __name__ == "__main__":
    main()

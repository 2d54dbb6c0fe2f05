"""
Public API:
- AttributesBuilder: builds the Attributes for publish/notification/request/response
- Attributes, MessageKind, Priority: envelope types
- Entity, Uri, Payload: addressing and payload containers
- Status, StatusCode: operation outcomes, mapped to google.rpc.Code
- CallOptions: per-call timeout and token for RPC
- Transport, Listener: abstract contract transports must implement
- UuidFactory, create_id: time-ordered message ids
"""
import logging

# Envelope types
from .message import (
    Attributes,
    Entity,
    MessageKind,
    Payload,
    Priority,
    Uri,
)

# Builder
from .builder import AttributesBuilder

# Outcomes & RPC options
from .status import Status, StatusCode
from .call_options import CallOptions, TIMEOUT_DEFAULT

# Transport contract
from .transport import Listener, Transport

# Ids
from .ids import UuidFactory, create_id

__all__ = [
    "AttributesBuilder",
    "Attributes",
    "MessageKind",
    "Priority",
    "Entity",
    "Uri",
    "Payload",
    "Status",
    "StatusCode",
    "CallOptions",
    "TIMEOUT_DEFAULT",
    "Transport",
    "Listener",
    "UuidFactory",
    "create_id",
]

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

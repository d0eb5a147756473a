"""Wire messages exchanged between the game client and the relay server."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum

from mage.vectors import Vector3f


class MessageType(IntEnum):
    CONNECT = 0
    DISCONNECT = 1
    POSITION_UPDATE = 2


_HEADER = struct.Struct("<ii")
_TRANSFORM = struct.Struct("<ii9f")

MESSAGE_SIZE = _HEADER.size
TRANSFORM_MESSAGE_SIZE = _TRANSFORM.size


@dataclass
class Message:
    """A bare message: its type and the sender's or subject's ID."""

    type: MessageType = MessageType.CONNECT
    id: int = 0

    def pack(self) -> bytes:
        return _HEADER.pack(int(self.type), self.id)


@dataclass
class TransformUpdateMessage(Message):
    """A player's position, rotation and scale."""

    type: MessageType = MessageType.POSITION_UPDATE
    position: Vector3f = field(default_factory=Vector3f)
    rotation: Vector3f = field(default_factory=Vector3f)
    scale: Vector3f = field(default_factory=Vector3f)

    def pack(self) -> bytes:
        return _TRANSFORM.pack(
            int(self.type), self.id, *self.position, *self.rotation, *self.scale
        )


def decode(data: bytes) -> Message:
    """Decode the message at the start of ``data``; trailing bytes are ignored."""
    if len(data) < MESSAGE_SIZE:
        raise ValueError(f"message needs at least {MESSAGE_SIZE} bytes, got {len(data)}")
    raw_type, ident = _HEADER.unpack_from(data)
    try:
        kind = MessageType(raw_type)
    except ValueError as exc:
        raise ValueError(f"unknown message type {raw_type}") from exc
    if kind is MessageType.POSITION_UPDATE:
        if len(data) < TRANSFORM_MESSAGE_SIZE:
            raise ValueError(
                f"position update needs {TRANSFORM_MESSAGE_SIZE} bytes, got {len(data)}"
            )
        values = _TRANSFORM.unpack_from(data)[2:]
        return TransformUpdateMessage(
            kind,
            ident,
            Vector3f(*values[0:3]),
            Vector3f(*values[3:6]),
            Vector3f(*values[6:9]),
        )
    return Message(kind, ident)
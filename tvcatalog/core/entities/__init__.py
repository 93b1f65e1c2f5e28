"""
Business entities of the catalog.

Entities are mutable objects with identity that live for the process lifetime.
They are owned by the registries; collaborators only read them.

Exports:
- Channel: User-facing broadcast outlet
- ChannelGroup: Exclusive partition of channels
- Transport: Tunable service bound to a channel
- ElementaryStream: Stream carried by a transport
- StreamType: Kind of elementary stream
"""

from tvcatalog.core.entities.channel import Channel, ChannelGroup
from tvcatalog.core.entities.transport import ElementaryStream, StreamType, Transport

__all__ = [
    "Channel",
    "ChannelGroup",
    "Transport",
    "ElementaryStream",
    "StreamType",
]

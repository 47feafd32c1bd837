#!/usr/bin/env python3
"""Basic usage example for midimessage.

This example demonstrates:
1. Decoding raw MIDI bytes into a message
2. Reading and changing semantic fields
3. Encoding back to wire bytes
4. Detecting channel mode messages
"""

from __future__ import annotations

from midimessage import create, decode, encode


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("midimessage Basic Usage Example")
    print("=" * 60)
    print()

    # Decode bytes from an input port
    print("1. Decoding a note on...")
    msg = decode(bytes([0x92, 55, 113]), 207)

    print(f"   Type: {msg.type}")
    print(f"   Channel: {msg.channel}")
    print(f"   Note: {msg.note}")
    print(f"   Velocity: {msg.velocity}")
    print(f"   Timestamp: {msg.timestamp} ms")
    print()

    # Transpose and re-encode
    print("2. Transposing up an octave...")
    msg.number = msg.number + 12
    encoded_data = encode(msg)

    print(f"   Hex: {encoded_data.hex()}")
    print(f"   Record: {msg.to_dict()}")
    print()

    # Normalization
    print("3. Normalizing out-of-range input...")
    clamped = create("noteon", 60, 300, 99)

    print(f"   Velocity 300 -> {clamped.velocity}")
    print(f"   Channel 99 -> {clamped.channel}")
    print()

    # Channel modes
    print("4. Detecting channel mode messages...")
    for data in ([0xB0, 120, 0], [0xB0, 123, 0], [0xB0, 126, 1], [0xB0, 7, 100]):
        mode = decode(data).cc_mode
        print(f"   {bytes(data).hex()}: {mode or 'ordinary controller'}")
    print()

    # Pitch bend
    print("5. Pitch bend packing...")
    bend = decode([0xE2, 114, 72])

    print(f"   Packed value: {bend.pitchbend}")
    print(f"   Re-encoded: {encode(bend).hex()}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3

"""Normalize Ethereum addresses to EIP-55 form and show their binary encoding"""

import sys

from ethereum_ids import Address, BinaryWriter, IdentifierError, write_binary

DEFAULT_INPUTS = [
    "0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed",
    "0xFB6916095CA1DF60BB79CE92CE3EA74C37C5D359",
    "0x5aaeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
]


def main(argv):
    """Main example function"""
    print("=== EIP-55 Address Normalization ===")
    inputs = argv or DEFAULT_INPUTS

    accepted = []
    for text in inputs:
        try:
            addr = Address.parse(text)
        except IdentifierError as e:
            print(f"  rejected {text}: {e}")
            continue
        accepted.append(addr)
        print(f"  {text} -> {addr}")

    writer = BinaryWriter()
    writer.uvarint(len(accepted))
    for addr in sorted(accepted):
        write_binary(writer, addr)
    print(f"Packed {len(accepted)} address(es): {writer.to_bytes().hex()}")
    return 0 if accepted else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))

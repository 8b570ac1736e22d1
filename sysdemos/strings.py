"""Small string parsing examples: SIP URIs and space-separated words."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Sequence

DEFAULT_TEXT = "word1 second_word word3"
DEFAULT_URI = "*1234#@192.168.1.2:5060"


@dataclass(frozen=True)
class SipUri:
    """Parts of a ``number@address:port`` URI; missing parts are None."""

    number: str
    address: str | None = None
    port: str | None = None


def parse_sip_uri(uri: str) -> SipUri:
    """Split ``number@address:port`` into its parts."""
    if "@" not in uri:
        return SipUri(uri)
    number, address = uri.split("@", 1)
    port = None
    if ":" in address:
        address, port = address.split(":", 1)
    return SipUri(number, address, port)


def split_words(text: str) -> list[str]:
    """Split on single spaces; runs of spaces give empty words."""
    if not text:
        return []
    return text.split(" ")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="String parsing examples.")
    parser.add_argument("--text", default=DEFAULT_TEXT)
    parser.add_argument("--uri", default=DEFAULT_URI)
    args = parser.parse_args(argv)

    print("\nStart split_string_to_words()")
    words = split_words(args.text)
    if words:
        print(f"Before:\n\tString  = {args.text}\nAfter:")
        for number, word in enumerate(words, start=1):
            print(f"\tWord {number} = {word}")

    print("\nStart parce_sip_uri()")
    print(f"Before:\n\tString  = {args.uri}")
    parts = parse_sip_uri(args.uri)
    print(f"After: \n\tNumber  = {parts.number}")
    print(f"\tAddress = {parts.address or 'None'}")
    print(f"\tPort    = {parts.port or 'None'}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
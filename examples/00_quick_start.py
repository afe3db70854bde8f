"""
Quick Start Example

Parses a few shortcut definitions and prints the records a key event
matcher would compare against.
"""
import logging

from keyseq import KeyEventType, ParseOptions, parse_sequence


SHORTCUTS = [
    "ctrl+s",
    "shift+ctrl+p",
    "g g",
    "ctrl+k ctrl+c",
    "ctrl++",
    "shift+/",
    "ctrl+foobar",
]


def main():
    logging.basicConfig(level=logging.INFO)

    print("=" * 60)
    print("Lenient parsing (unknown keys accepted)")
    print("=" * 60)
    for shortcut in SHORTCUTS:
        result = parse_sequence(shortcut)
        print(f"{shortcut!r:20} -> prefix={result.sequence.prefix!r} id={result.combination.id!r}")

    print("\n" + "=" * 60)
    print("Strict parsing on keyup")
    print("=" * 60)
    options = ParseOptions.from_env(key_event_type=KeyEventType.KEYUP, ensure_valid_keys=True)
    for shortcut in SHORTCUTS:
        result = parse_sequence(shortcut, options)
        if not result.ok:
            print(f"{shortcut!r:20} -> rejected")
            continue
        print(f"{shortcut!r:20} -> {result.combination.model_dump(by_alias=True)}")


if __name__ == "__main__":
    main()

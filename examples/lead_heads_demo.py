"""
Lead Heads Demonstration

Parses a handful of well-known methods, prints each one's full expansion,
compact form, lead head, parity and how many leads it takes to come round.
"""

import logging

from ringing import Stage, Touch


METHODS = [
    ("Original Minor", "x1", Stage.MINOR),
    ("Bastow Minor", "x2,1", Stage.MINOR),
    ("Gnu Bob Doubles", "3.4.5.1.5.1.5.1.5.1", Stage.DOUBLES),
    ("Grandsire Cinques", "3,1.E.1.E.1.E.1.E.1.E.1", Stage.CINQUES),
    ("Hurricane Jack Differential Royal", "x4x4x7x7x7.36.7.8x,2", Stage.ROYAL),
]


def print_section(title):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def demonstrate_method(name, notation, stage):
    print_section(f"{name} ({stage})")

    touch = Touch.from_string(notation, stage)
    lead_head = touch.leftover_change

    print(f"  Notation:   {notation}")
    print(f"  Expanded:   {touch.to_string_full()}")
    print(f"  Compact:    {touch.to_string_compact()}")
    print(f"  Rows:       {touch.length}")
    print(f"  Lead head:  {lead_head}  ({lead_head.parity().name.lower()})")
    print(f"  Leads to come round: {lead_head.order()}")


def main():
    logging.basicConfig(level=logging.DEBUG)
    for name, notation, stage in METHODS:
        demonstrate_method(name, notation, stage)


if __name__ == "__main__":
    main()

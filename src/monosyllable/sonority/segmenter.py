"""Onset/nucleus/coda segmentation of a single syllable.

A three-state machine walks the phones left to right:

    IN_ONSET --vowel--> IN_NUCLEUS --consonant--> IN_CODA

Consonants before the first vowel form the onset, the run of vowels forms
the nucleus, and the trailing consonants form the coda. Anything that does
not fit that shape is reported as a MalformedSyllable instead of raising.
"""

from enum import Enum
from typing import Sequence

from monosyllable.phones import DEFAULT_INVENTORY, PhoneInventory
from monosyllable.types import MalformedSyllable, SegmentOutcome, Segmentation


class _State(Enum):
    IN_ONSET = "onset"
    IN_NUCLEUS = "nucleus"
    IN_CODA = "coda"


def segment_syllable(
    phones: Sequence[str],
    inventory: PhoneInventory = DEFAULT_INVENTORY,
) -> SegmentOutcome:
    """Split one syllable's phones into (onset, nucleus, coda).

    Args:
        phones: The syllable's phones in order.
        inventory: Vowel and consonant tables used for classification.

    Returns:
        A Segmentation, or a MalformedSyllable if there is no vowel, a vowel
        follows the coda, or a phone is in neither table.
    """
    original = tuple(phones)
    onset: list[str] = []
    nucleus: list[str] = []
    coda: list[str] = []
    state = _State.IN_ONSET

    for p in original:
        if p not in inventory:
            return MalformedSyllable(original, f"unknown phone {p!r}")

        if state == _State.IN_ONSET:
            if inventory.is_vowel(p):
                nucleus.append(p)
                state = _State.IN_NUCLEUS
            else:
                onset.append(p)
        elif state == _State.IN_NUCLEUS:
            # A run of vowels is kept as one elongated nucleus
            if inventory.is_vowel(p):
                nucleus.append(p)
            else:
                coda.append(p)
                state = _State.IN_CODA
        elif state == _State.IN_CODA:
            if inventory.is_vowel(p):
                return MalformedSyllable(original, f"vowel {p!r} after coda")
            coda.append(p)

    if state == _State.IN_ONSET:
        return MalformedSyllable(original, "no vowel")

    return Segmentation(tuple(onset), tuple(nucleus), tuple(coda))

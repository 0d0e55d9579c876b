"""URB world lore and the keyword narrator.

The narrator is a lookup, not a generator: the first keyword group found in the
player's input picks a canned DM line. Any callable matching the ``Narrator``
protocol can stand in for it:

    def __call__(self, player_input: str, character: Character) -> str: ...
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Protocol

from urb_companion.models import Character, race_display_name

logger = logging.getLogger(__name__)


URB_LORE = MappingProxyType({
    "locations": (
        {
            "name": "Richland",
            "description": "The central urban hub of the URB world, a sprawling city of "
            "technological marvels and social inequities.",
        },
        {
            "name": "The Wastes",
            "description": "Barren lands outside the urban centers, inhabited by nomadic "
            "tribes and dangerous creatures.",
        },
        {
            "name": "Solozo Enclaves",
            "description": "Technologically advanced communities where the Solozo race "
            "develops and implements their innovations.",
        },
        {
            "name": "Barab Territories",
            "description": "Rugged landscapes where the physically imposing Barab race makes "
            "their home, focusing on strength and tradition.",
        },
        {
            "name": "Twilight Zones",
            "description": "Mystical regions where reality seems altered, home to the "
            "enigmatic Twilighter race with their special abilities.",
        },
    ),
    "races": (
        {
            "name": "Solozo",
            "description": "Technologically gifted humanoids with a profound understanding of "
            "machines and digital systems. They tend toward analytical thinking and often "
            "struggle with emotional expression.",
        },
        {
            "name": "Barab",
            "description": "Physically powerful race with impressive natural strength and "
            "endurance. They value traditional ways and physical prowess over technological "
            "solutions.",
        },
        {
            "name": "Twilighter",
            "description": "Mysterious race with inherent connections to the esoteric forces "
            "of the world. They often possess intuitive abilities that seem supernatural to "
            "others.",
        },
    ),
    "concepts": (
        {
            "name": "Mathix",
            "description": "A fundamental energy field that permeates the URB world. Those "
            "sensitive to it can manipulate reality in subtle ways.",
        },
        {
            "name": "Rax",
            "description": "Physical manifestation of concentrated Mathix energy, often "
            "appearing as crystalline structures with unique properties.",
        },
        {
            "name": "Life Force",
            "description": "The essential vitality that determines a being's overall health "
            "and survival capacity in the harsh URB world.",
        },
        {
            "name": "Explosion of Fate",
            "description": "The idea behind exploding dice: sometimes destiny produces "
            "extraordinary results beyond normal capabilities.",
        },
    ),
    "factions": (
        {
            "name": "The Conclave",
            "description": "Ruling council that governs Richland and attempts to maintain "
            "order across known territories.",
        },
        {
            "name": "Waste Walkers",
            "description": "Nomadic groups that traverse the dangerous Wastes, trading "
            "information and salvage between settlements.",
        },
        {
            "name": "Mathix Seekers",
            "description": "Organization dedicated to understanding and harnessing the power "
            "of the Mathix energy field.",
        },
    ),
    "core_narratives": (
        {
            "name": "The Great Divergence",
            "description": "Long ago, the ancestors of the three races lived as one people. "
            "Exposure to different concentrations of Mathix energy during a cataclysm caused "
            "the population to evolve in different directions, giving rise to the Solozo, "
            "Barab and Twilighter races.",
        },
        {
            "name": "The Founding of Richland",
            "description": "Centuries after the Great Divergence, representatives from all "
            "three races established Richland as a hub where their cultures could coexist "
            "and trade. Tensions remain, but the cooperative foundation has endured.",
        },
        {
            "name": "The Rax Wars",
            "description": "Fifty years ago a massive Rax deposit was discovered in contested "
            "territory. The conflict over it reshaped political boundaries and left scars on "
            "the landscape that remain visible today.",
        },
    ),
})


def lookup_lore(category: str | None = None) -> dict[str, list[dict]]:
    """Return lore entries, all categories or just one. Unknown category → {}."""
    if category is None:
        return {name: [dict(e) for e in entries] for name, entries in URB_LORE.items()}
    if category not in URB_LORE:
        return {}
    return {category: [dict(e) for e in URB_LORE[category]]}


# ---------------------------------------------------------------------------
# Narrator
# ---------------------------------------------------------------------------

class Narrator(Protocol):
    def __call__(self, player_input: str, character: Character) -> str: ...


# (keywords, response): first group with a keyword in the input wins.
# "{name}" and "{race}" are filled from the character.
DM_RESPONSES: tuple[tuple[tuple[str, ...], str], ...] = (
    (
        ("hello", "hi "),
        "Greetings, {name} of the {race} people. What brings you to these parts of the URB "
        "world? The paths before you are many, and fate's dice roll ever onward.",
    ),
    (
        ("richland", "city"),
        "Richland stands as a testament to what cooperation between the races can achieve, "
        "and to what conflicts remain unresolved. Its towers of gleaming metal reach toward "
        "the sky while the lower levels remain shrouded in perpetual shadow. The Conclave "
        "maintains order here, though their methods are not always gentle.",
    ),
    (
        ("solozo", "technology"),
        "The Solozo approach everything with analytical precision. Their innovations power "
        "much of modern life in the URB world, from the energy shields that protect "
        "settlements from the toxic winds to the networks that bind distant communities "
        "together. Outsiders often find their enclaves cold and sterile.",
    ),
    (
        ("barab", "strength"),
        "The Barab believe in the wisdom of tradition and the undeniable truth of physical "
        "reality. Where the Solozo would build a machine to solve a problem, a Barab would "
        "train body and mind to overcome it directly. Their territories are built to last.",
    ),
    (
        ("twilighter", "mysterious"),
        "Few truly understand the Twilighters, even after centuries of coexistence. They "
        "perceive the Mathix in ways others cannot, sensing its currents and occasionally "
        "bending them in subtle ways that seem like magic to the uninitiated.",
    ),
    (
        ("mathix", "energy"),
        "The Mathix permeates everything in our world, though most beings perceive it only "
        "indirectly, like feeling wind on your skin rather than seeing the air itself move. "
        "Understanding the Mathix is the key to understanding the deeper nature of the URB "
        "world.",
    ),
    (
        ("rax", "crystal"),
        "Rax crystals form where the Mathix concentrates and solidifies into physical form. "
        "Even a small fragment holds immense potential energy. The largest deposits are "
        "heavily guarded, their control often determining the balance of power in a region.",
    ),
)

DEFAULT_DM_RESPONSE = (
    "You continue your journey through the URB world, where the three races maintain "
    "their uneasy balance and the mysteries of the Mathix await discovery. What action "
    "will you take next?"
)


class KeywordNarrator:
    """Canned DM responses keyed by words in the player's input.

    Matching is a case-insensitive substring test.
    """

    def __init__(
        self,
        responses: tuple[tuple[tuple[str, ...], str], ...] = DM_RESPONSES,
        default: str = DEFAULT_DM_RESPONSE,
    ) -> None:
        self._responses = responses
        self._default = default

    def __call__(self, player_input: str, character: Character) -> str:
        text = player_input.lower()
        for keywords, response in self._responses:
            if any(k in text for k in keywords):
                logger.debug("narrator matched keywords=%s", keywords)
                return response.format(
                    name=character.name, race=race_display_name(character.race)
                )
        logger.debug("narrator fell back to default response")
        return self._default

from __future__ import annotations

from typing import Mapping, Sequence

CATEGORY_TAGS = {"monster": "M", "weapon": "W", "potion": "P", "other": "?"}
SUIT_GLYPHS = {"hearts": "H", "diamonds": "D", "clubs": "C", "spades": "S"}


def card_text(card: Mapping[str, object]) -> str:
    suit = SUIT_GLYPHS.get(str(card.get("suit")), "?")
    tag = CATEGORY_TAGS.get(str(card.get("category")), "?")
    return f"{card.get('label')}{suit}({tag})"


def render_snapshot(snap: Mapping[str, object]) -> str:
    lines: list[str] = []
    lines.append(
        f"Turn {snap['turn_number']}  HP {snap['health']}/{snap['starting_health']}  "
        f"Deck {snap['deck_count']}  Discard {snap['discard_count']}"
    )

    equipped = snap.get("equipped")
    if isinstance(equipped, Mapping):
        monsters = equipped.get("monsters")
        slain = ", ".join(card_text(m) for m in monsters) if isinstance(monsters, Sequence) else ""
        last = equipped.get("last_slain_value")
        limit = "any" if last is None else f"<= {last}"
        lines.append(f"Weapon: {card_text(equipped['card'])}  fights {limit}  slain [{slain}]")
    else:
        lines.append("Weapon: none")

    room = snap.get("room")
    if isinstance(room, Sequence):
        cells = [f"[{i}] {card_text(c)}" for i, c in enumerate(room)]
        lines.append("Room: " + "  ".join(cells))

    flags = [f"picks {snap['picks_this_turn']}"]
    if snap.get("used_potion_this_turn"):
        flags.append("potion used")
    if snap.get("previous_avoided"):
        flags.append("cannot avoid")
    lines.append("(" + ", ".join(flags) + ")")

    if snap.get("game_over"):
        lines.append(f"GAME OVER - score {snap['score']}")
    return "\n".join(lines)

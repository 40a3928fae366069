"""Renderer-owned card face state.

Which side of a card is showing has nothing to do with selection, so it
lives here instead of in the selector. Positions are wrapped indices; the
two phantom cards flip independently of the real cards they mirror.
"""

from enum import Enum

from src.core.items import Item

LOADING_TEXT = "載入中..."


class CardFace(Enum):
    """Side of a card facing the user."""

    FRONT = "front"  # store name
    BACK = "back"  # store description

    def flipped(self) -> "CardFace":
        return CardFace.BACK if self is CardFace.FRONT else CardFace.FRONT


class CardFaces:
    """Mapping from wrapped position to the face currently shown."""

    def __init__(self) -> None:
        self._faces: dict[int, CardFace] = {}

    def face(self, position: int) -> CardFace:
        return self._faces.get(position, CardFace.FRONT)

    def flip(self, position: int) -> CardFace:
        """Turn the card at position over and return the new face."""
        new_face = self.face(position).flipped()
        if new_face is CardFace.FRONT:
            del self._faces[position]
        else:
            self._faces[position] = new_face
        return new_face

    def reset(self) -> None:
        """Show every card's front again."""
        self._faces.clear()

    def flipped_positions(self) -> list[int]:
        return sorted(self._faces)


def card_text(item: Item, face: CardFace, label_visible: bool = True) -> str:
    """Text a card shows for the given face, or "" while labels are hidden."""
    if not label_visible:
        return ""
    return item.name if face is CardFace.FRONT else item.description

"""Plain-text rendering of characters for sharing."""

from __future__ import annotations

from charsearch.domain.models import Character
from charsearch.utils.datetime import format_created_date

SHARE_SIGNATURE = "From the Rick and Morty Character Search App"


def share_title(character: Character) -> str:
    return f"Character: {character.name}"


def build_share_text(character: Character) -> str:
    lines = [
        f"Name: {character.name}",
        f"Species: {character.species}",
        f"Status: {character.status}",
        f"Origin: {character.origin_name}",
    ]
    if character.type:
        lines.append(f"Type: {character.type}")
    lines.extend(
        [
            f"Created: {format_created_date(character.created)}",
            "",
            f"Image: {character.image}",
            "",
            SHARE_SIGNATURE,
        ]
    )
    return "\n".join(lines)


__all__ = ["SHARE_SIGNATURE", "build_share_text", "share_title"]

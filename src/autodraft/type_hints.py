"""Type hints used in Auto Draft."""

from typing import TYPE_CHECKING, List, Literal, Optional, Union

if TYPE_CHECKING:
    from autodraft.player import SessionPlayer
    from autodraft.tournament.models import ByeParticipant

# Pairing mode literals (for type hints)
PairingMode = Literal["random", "structured"]

# Notification kind literals
NoticeKind = Literal[
    "draft_start",
    "elimination",
    "warning",
    "round_advance",
    "sudden_death",
    "champion",
    "player_added",
]

# A reported pairing result: the winner's id, or "draw"
PairingOutcome = str
MaybeOutcome = Optional[PairingOutcome]

# Either side of a pairing
Participant = Union["SessionPlayer", "ByeParticipant"]

# Final standings, best placement first
Standings = List["SessionPlayer"]

#  LocalWords:  PairingOutcome

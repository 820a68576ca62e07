from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Mark(str, Enum):
    X = 'X'
    O = 'O'


class RpsRole(str, Enum):
    A = 'A'
    B = 'B'


class RpsChoice(str, Enum):
    ROCK = 'Rock'
    PAPER = 'Paper'
    SCISSORS = 'Scissors'


FIRST_SEAT_COLOR = '#22c55e'
OTHER_SEAT_COLOR = '#3b82f6'


@dataclass
class TicTacToePlayer:
    id: str
    mark: Mark

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'mark': self.mark.value}


@dataclass
class TicTacToeRoom:
    room_id: str
    players: List[TicTacToePlayer] = field(default_factory=list)
    board: List[Optional[Mark]] = field(default_factory=lambda: [None] * 9)
    turn: Mark = Mark.X
    winner: Optional[Mark] = None
    is_bot: bool = False

    def find_player(self, connection_id: str) -> Optional[TicTacToePlayer]:
        return next((p for p in self.players if p.id == connection_id), None)

    def to_dict(self, is_draw: bool = False) -> Dict[str, Any]:
        return {
            'board': [cell.value if cell else None for cell in self.board],
            'turn': self.turn.value,
            'winner': self.winner.value if self.winner else None,
            'isDraw': is_draw,
            'players': [p.to_dict() for p in self.players],
            'isBot': self.is_bot,
        }


@dataclass
class RpsPlayer:
    id: str
    role: RpsRole

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'role': self.role.value}


@dataclass
class RpsRoom:
    room_id: str
    players: List[RpsPlayer] = field(default_factory=list)
    # connection id -> choice; never sent to clients before the reveal
    choices: Dict[str, RpsChoice] = field(default_factory=dict)
    result: Optional[str] = None

    def find_player(self, connection_id: str) -> Optional[RpsPlayer]:
        return next((p for p in self.players if p.id == connection_id), None)

    def player_for_role(self, role: RpsRole) -> Optional[RpsPlayer]:
        return next((p for p in self.players if p.role == role), None)

    def players_payload(self) -> List[Dict[str, Any]]:
        return [p.to_dict() for p in self.players]

    def to_dict(self) -> Dict[str, Any]:
        """Public snapshot: only the number of choices made, never the choices."""
        return {
            'players': self.players_payload(),
            'choices': len(self.choices),
            'result': self.result,
        }

    def reveal_dict(self) -> Dict[str, Any]:
        return {
            'players': self.players_payload(),
            'choices': {player_id: choice.value for player_id, choice in self.choices.items()},
            'result': self.result,
        }


@dataclass
class FindNumberPlayer:
    id: str
    color: str

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'color': self.color}


@dataclass
class FindNumberRoom:
    room_id: str
    numbers: List[int] = field(default_factory=list)
    players: List[FindNumberPlayer] = field(default_factory=list)
    claimed: Dict[int, str] = field(default_factory=dict)
    next: int = 1
    score: Dict[str, int] = field(default_factory=dict)
    winner: Optional[str] = None

    def find_player(self, connection_id: str) -> Optional[FindNumberPlayer]:
        return next((p for p in self.players if p.id == connection_id), None)

    @property
    def is_finished(self) -> bool:
        return self.next > len(self.numbers)

    def claimed_payload(self) -> Dict[str, str]:
        # JSON object keys are strings on the wire
        return {str(number): owner for number, owner in self.claimed.items()}

    def to_dict(self) -> Dict[str, Any]:
        return {
            'players': [p.to_dict() for p in self.players],
            'numbers': list(self.numbers),
            'next': self.next,
            'score': dict(self.score),
            'claimed': self.claimed_payload(),
        }

    def reveal_dict(self) -> Dict[str, Any]:
        return {
            'players': [p.to_dict() for p in self.players],
            'score': dict(self.score),
            'claimed': self.claimed_payload(),
            'winner': self.winner,
        }

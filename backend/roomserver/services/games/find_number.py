import random
from typing import Dict, List

DRAW = 'Draw'


def new_numbers(rng: random.Random, count: int) -> List[int]:
    """Shuffled permutation of 1..count; this is the board's display order."""
    numbers = list(range(1, count + 1))
    rng.shuffle(numbers)
    return numbers


def decide_winner(score: Dict[str, int]) -> str:
    """Connection id with the strictly highest score, or 'Draw' on a tie."""
    if not score:
        return DRAW
    best = max(score.values())
    leaders = [player_id for player_id, points in score.items() if points == best]
    if len(leaders) != 1:
        return DRAW
    return leaders[0]

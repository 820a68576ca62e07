from roomserver.models import RpsChoice

# choice -> the choice it defeats
BEATS = {
    RpsChoice.ROCK: RpsChoice.SCISSORS,
    RpsChoice.SCISSORS: RpsChoice.PAPER,
    RpsChoice.PAPER: RpsChoice.ROCK,
}

DRAW = 'Draw'


def decide(a: RpsChoice, b: RpsChoice) -> str:
    """Resolve one round. Returns the winning role ('A' or 'B') or 'Draw'."""
    if a == b:
        return DRAW
    return 'A' if BEATS[a] == b else 'B'

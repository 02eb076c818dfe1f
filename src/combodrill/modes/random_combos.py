"""Random Combos - untimed play through freshly generated sequences."""

from combodrill.utilities.symbols import random_sequence
from .game_mode import GameMode


class RandomCombos(GameMode):
    """Solve random arrow sequences of a fixed length."""

    METADATA = {
        "id": "RANDOM",
        "name": "Random Combos",
        "menu_key": "2",
        "menu_label": "Random Combos ({rounds} random sequences of {random_length} arrows)",
        "banner": "Random Combo Mode: Solve {mode.rounds} random combos (each with {mode.length} arrows)!",
    }

    def __init__(self, core):
        super().__init__(core)
        self.length = core.data.get_int("random_length")

    async def run(self):
        self.start_session()
        rounds = [
            ("Random", random_sequence(self.length, self.core.rng))
            for _ in range(self.rounds)
        ]
        return await self.play_untimed(rounds)

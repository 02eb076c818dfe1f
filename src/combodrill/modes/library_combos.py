"""Library Combos - untimed play through combos from the combo source."""

from .game_mode import GameMode


class LibraryCombos(GameMode):
    """Solve a random selection of named combos at your own pace."""

    METADATA = {
        "id": "LIBRARY",
        "name": "JSON Combos",
        "menu_key": "1",
        "menu_label": "JSON Combos ({rounds} random combos from file)",
        "banner": "JSON Combos Mode: Solve {mode.rounds} random combos from the file!",
    }

    async def run(self):
        self.start_session()
        combos = self.select_combos(self.core.combo_source.load(), self.rounds)
        return await self.play_untimed((combo.name, combo.sequence) for combo in combos)

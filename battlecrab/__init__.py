"""BattleCrab: two-player text Battleship."""

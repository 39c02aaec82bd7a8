"""Chess board state, piece moves, evaluation, search and an interactive game."""
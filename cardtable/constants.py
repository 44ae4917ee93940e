"""Table-wide constants for the cardtable engine."""

# Highest non-bust hand value
BUST_LIMIT = 21

# Dealer and bots keep drawing while their running total is below this
DRAW_THRESHOLD = 17

# Amount removed from a total when an ace is re-read as 1 instead of 11
ACE_REDUCTION = 10

MIN_PLAYERS = 1
MAX_PLAYERS = 3

INITIAL_HAND_SIZE = 2

STARTING_BANKROLL = 5000
DEFAULT_STAKE = 100

DEFAULT_ASSET_ROOT = "/BlackJack/resources/images/cards"

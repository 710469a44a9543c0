"""Type hints used in SwissTour."""

from typing import Literal, Optional, Tuple, Union

# Colour history entry literals (for type hints)
# Persisted result literals, None means not yet entered
# persisted result, None while pending
ResultString = Optional[Literal["1-0", "0-1", "0.5-0.5"]]

# List of players
# (white_id, black_id) of a repeated pairing
RepeatPair = Tuple[str, str]
# Name, or (name, rating) when registering players
PlayerEntry = Union[str, Tuple[str, Optional[int]]]

#  LocalWords:  RepeatPair
